from pdml.parser.pdml_parser import PDMLParser, PageParser, expect, parse_file, parse_string

__all__ = ['PDMLParser', 'PageParser', 'expect', 'parse_file', 'parse_string']
