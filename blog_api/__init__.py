# Blog content API package
