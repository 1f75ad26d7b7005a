from mal.reader.tokenizer import tokenize
from mal.reader.parser import TokenStream, read_str, parse_all

__all__ = ["tokenize", "TokenStream", "read_str", "parse_all"]
