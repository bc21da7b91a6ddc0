import typing
from . import io

def hashflags(filename: str
        ) -> typing.List[typing.Tuple[str, typing.Optional[str]]]:
    """
    `#--name value` lines from the comment block at the top of a file.
    Reading stops at the first line that isn't a comment.
    """
    flags: typing.List[typing.Tuple[str, typing.Optional[str]]] = []
    with io.open(filename, "r") as source:
        for line in source:
            line = line.rstrip("\n")
            if not line.startswith("#"):
                break

            comment = line[1:].lstrip()
            if comment.startswith("--"):
                name, _, value = comment[2:].partition(" ")
                flags.append((name, value.strip() or None))
    return flags
