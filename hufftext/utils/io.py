import os


def read_text(path, encoding="utf-8"):
    """
    Reads a text file for coding.

    path: path of the file
    encoding: text encoding used to decode the file

    returns
        text: str, decoded content
        size: int, size of the file on disk in bytes
    """
    size = os.path.getsize(path)
    with open(path, "r", encoding=encoding, newline="") as f:
        text = f.read()
    return text, size
