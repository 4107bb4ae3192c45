from pdml.lexer.lexer import Lexer

__all__ = ['Lexer']
