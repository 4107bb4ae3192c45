from pdml.reader.char_reader import CharReader

__all__ = ['CharReader']
