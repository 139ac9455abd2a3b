"""Shell command line parser: tokenizing and redirection extraction"""

import logging
from typing import Dict, List, Optional, Tuple

from .command import CONSOLE, ParsedCommand, RedirectionTarget

logger = logging.getLogger(__name__)

# operator -> (stream, append)
REDIRECT_OPERATORS: Dict[str, Tuple[str, bool]] = {
    '>': ('stdout', False),
    '1>': ('stdout', False),
    '>>': ('stdout', True),
    '1>>': ('stdout', True),
    '2>': ('stderr', False),
    '2>>': ('stderr', True),
}


class CommandParser:
    """Parse raw command lines into commands and redirection targets"""

    @staticmethod
    def tokenize(line: str) -> List[str]:
        """
        Split a command line into tokens, honoring quotes and escapes

        Outside quotes a backslash takes the next character literally and
        whitespace separates tokens. Inside single quotes everything is
        literal. Inside double quotes a backslash takes the next character
        literally, and backslash-newline is dropped entirely. An unterminated
        quote is closed silently at end of input.

        Args:
            line: Raw command line

        Returns:
            List of tokens in order

        Example:
            >>> CommandParser.tokenize('echo \\'a b\\' "c\\\\"d"')
            ['echo', 'a b', 'c"d']
        """
        tokens = []
        current = []
        in_single = False
        in_double = False
        escape_next = False
        i = 0
        n = len(line)

        while i < n:
            c = line[i]

            if escape_next:
                current.append(c)
                escape_next = False
                i += 1
                continue

            if in_single:
                if c == "'":
                    in_single = False
                else:
                    current.append(c)
                i += 1
            elif in_double:
                if c == '\\' and i + 1 < n:
                    nxt = line[i + 1]
                    if nxt != '\n':
                        current.append(nxt)
                    i += 2
                    continue
                if c == '"':
                    in_double = False
                else:
                    # includes a backslash that ends the input
                    current.append(c)
                i += 1
            else:
                if c == '\\':
                    escape_next = True
                    i += 1
                elif c == "'":
                    in_single = True
                    i += 1
                elif c == '"':
                    in_double = True
                    i += 1
                elif c.isspace():
                    if current:
                        tokens.append(''.join(current))
                        current = []
                    while i < n and line[i].isspace():
                        i += 1
                else:
                    current.append(c)
                    i += 1

        if current:
            tokens.append(''.join(current))

        return tokens

    @staticmethod
    def extract_redirections(
        tokens: List[str],
        errors: Optional[List[str]] = None
    ) -> Tuple[List[str], RedirectionTarget, RedirectionTarget]:
        """
        Pull redirection operators and their filenames out of a token list

        Each operator consumes the token after it as a filename. The last
        operator for a stream wins. An operator with nothing after it is
        dropped and reported as a syntax error; parsing carries on.

        Args:
            tokens: Tokens from tokenize()
            errors: Optional list that collects syntax error messages

        Returns:
            Tuple of (command tokens, stdout target, stderr target)
        """
        command_tokens = []
        targets = {'stdout': CONSOLE, 'stderr': CONSOLE}

        i = 0
        while i < len(tokens):
            tok = tokens[i]
            if tok not in REDIRECT_OPERATORS:
                command_tokens.append(tok)
                i += 1
                continue

            stream, append = REDIRECT_OPERATORS[tok]
            if i + 1 >= len(tokens):
                kind = 'append' if append else 'redirection'
                message = f"Syntax error: missing filename for {kind}"
                logger.debug("dropping bare operator %r", tok)
                if errors is not None:
                    errors.append(message)
                i += 1
                continue

            targets[stream] = RedirectionTarget.to_file(tokens[i + 1], append=append)
            i += 2

        return command_tokens, targets['stdout'], targets['stderr']

    @staticmethod
    def parse_command_line(line: str, errors: Optional[List[str]] = None) -> Optional[ParsedCommand]:
        """
        Parse a complete command line

        Args:
            line: Raw command line
            errors: Optional list that collects syntax error messages

        Returns:
            ParsedCommand, or None if nothing but redirections was given
        """
        tokens = CommandParser.tokenize(line)
        logger.debug("tokens: %r", tokens)

        command_tokens, stdout, stderr = CommandParser.extract_redirections(tokens, errors)
        if not command_tokens:
            return None

        return ParsedCommand(
            name=command_tokens[0],
            args=command_tokens[1:],
            stdout=stdout,
            stderr=stderr,
        )
