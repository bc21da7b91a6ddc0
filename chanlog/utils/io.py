import builtins

def open(path: str, mode: str="r"):
    return builtins.open(path, mode, encoding="utf8")

class FileAppender(object):
    # opened and closed for every line; nothing is locked
    def append(self, filename: str, line: str):
        with open(filename, "a") as log_file:
            log_file.write("%s\n" % line)
