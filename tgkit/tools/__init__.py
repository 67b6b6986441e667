"""String helpers and whole-file reading and writing."""