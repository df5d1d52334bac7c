""" CALC - Lexer and parser for sums of non-negative integers """
import logging
from enum import Enum

logger = logging.getLogger(__name__)

_SHOULD_LOG_LEXER = False
_SHOULD_LOG_PARSER = False


def configure_logging(lexer=False, parser=False):
    global _SHOULD_LOG_LEXER, _SHOULD_LOG_PARSER
    _SHOULD_LOG_LEXER = lexer
    _SHOULD_LOG_PARSER = parser


class ErrorCode(Enum):
    INVALID_CHARACTER = 'Invalid character'
    UNEXPECTED_END_OF_INPUT = 'Unexpected end of input'
    INVALID_TOKEN = 'Invalid token'


class Error(Exception):
    def __init__(self, error_code=None, token=None, message=None):
        self.error_code = error_code
        self.token = token
        self.message = f'{self.__class__.__name__}: {message}'
        super().__init__(self.message)


class LexerError(Error):
    def __init__(self, character, position):
        self.character = character
        self.position = position
        super().__init__(
            error_code=ErrorCode.INVALID_CHARACTER,
            message=f'{ErrorCode.INVALID_CHARACTER.value} {character!r} at position {position}',
        )


class ParserError(Error):
    def __init__(self, error_code, token, position):
        self.position = position
        if token is None:
            message = f'{error_code.value} at token {position}'
        else:
            message = f'{error_code.value} -> {token} at token {position}'
        super().__init__(error_code=error_code, token=token, message=message)


###############################################################################
#                                                                             #
#  TOKENS                                                                     #
#                                                                             #
###############################################################################

class TokenType(Enum):
    NUMBER = 'NUMBER'
    PLUS = '+'


class Token(object):
    def __init__(self, type, value):
        self.type = type
        # token value: a non-negative int for NUMBER, '+' for PLUS
        self.value = value

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, value)

    @classmethod
    def plus(cls):
        return cls(TokenType.PLUS, TokenType.PLUS.value)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value) == (other.type, other.value)

    def __hash__(self):
        return hash((self.type, self.value))

    def __str__(self):
        """String representation of the token case.

        Examples:
            Number(10)
            Plus
        """
        if self.type is TokenType.NUMBER:
            return f'Number({self.value})'
        if self.type is TokenType.PLUS:
            return 'Plus'
        raise AssertionError(f'unhandled token type {self.type}')

    def __repr__(self):
        return 'Token({type}, {value})'.format(
            type=self.type.name,
            value=repr(self.value),
        )


###############################################################################
#                                                                             #
#  LEXER                                                                      #
#                                                                             #
###############################################################################

DIGITS = '0123456789'


class Lexer(object):
    def __init__(self, text):
        # client string input, e.g. "10 + 3 + 5"
        self.text = text
        # self.pos is an index into self.text, len(text) marks end of input
        self.pos = 0

    def log(self, msg):
        if _SHOULD_LOG_LEXER:
            logger.debug(msg)

    def error(self, character):
        raise LexerError(character=character, position=self.pos)

    def peek(self):
        """Return the character under the cursor, or None at end of input."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def advance(self):
        if self.pos >= len(self.text):
            raise AssertionError('cannot advance past the end')
        self.pos += 1

    def number(self):
        """Return a multidigit integer consumed from the input.

        Only called when the current character is a digit. Python ints
        do not overflow, so long digit runs keep their exact value.
        """
        value = 0
        while self.peek() is not None and self.peek() in DIGITS:
            value = value * 10 + DIGITS.index(self.peek())
            self.advance()
        return value

    def lex(self):
        """Lexical analyzer (also known as scanner or tokenizer)

        Scans the whole input left to right and returns the list of
        tokens. Stops at the first character that is not a digit,
        '+' or a space.
        """
        tokens = []

        while self.peek() is not None:
            current_char = self.peek()

            if current_char in DIGITS:
                token = Token.number(self.number())
            elif current_char == TokenType.PLUS.value:
                token = Token.plus()
                self.advance()
            elif current_char == ' ':
                self.advance()
                continue
            else:
                self.log(f'Invalid character {current_char!r} at {self.pos}')
                self.error(current_char)

            self.log(f'Lexed {token}')
            tokens.append(token)

        return tokens


###############################################################################
#                                                                             #
#  PARSER                                                                     #
#                                                                             #
###############################################################################

class Parser(object):
    """Sums a token sequence of the shape: expr : NUMBER (PLUS NUMBER)*"""

    def __init__(self, tokens):
        self.tokens = tuple(tokens)
        # index of the next token to hand out, len(tokens) marks the end
        self.pos = 0

    def log(self, msg):
        if _SHOULD_LOG_PARSER:
            logger.debug(msg)

    def error(self, error_code, token, position):
        raise ParserError(
            error_code=error_code,
            token=token,
            position=position,
        )

    def get_next_token(self):
        if self.pos >= len(self.tokens):
            return None
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def number(self):
        token = self.get_next_token()
        if token is None:
            self.error(ErrorCode.UNEXPECTED_END_OF_INPUT, None, self.pos)

        if token.type is TokenType.NUMBER:
            return token.value
        if token.type is TokenType.PLUS:
            self.error(ErrorCode.INVALID_TOKEN, token, self.pos - 1)
        raise AssertionError(f'unhandled token type {token.type}')

    def parse(self):
        """expr : NUMBER (PLUS NUMBER)*"""
        value = self.number()

        while True:
            token = self.get_next_token()
            if token is None:
                break

            if token.type is TokenType.PLUS:
                value += self.number()
                self.log(f'Running total {value}')
            elif token.type is TokenType.NUMBER:
                # two numbers in a row with no PLUS between them
                self.error(ErrorCode.INVALID_TOKEN, token, self.pos - 1)
            else:
                raise AssertionError(f'unhandled token type {token.type}')

        self.log(f'Parsed {len(self.tokens)} tokens to {value}')
        return value


def lex(text):
    return Lexer(text).lex()


def parse(tokens):
    return Parser(tokens).parse()


def try_lex(text):
    """Like lex(), but returns None instead of raising a LexerError."""
    try:
        return lex(text)
    except LexerError:
        return None


def try_parse(tokens):
    """Like parse(), but returns None instead of raising a ParserError."""
    try:
        return parse(tokens)
    except ParserError:
        return None
