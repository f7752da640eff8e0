# config package
