"""
REPL - Read-Eval-Print Loop for trying out the parser

Lines are buffered until the text ends with ';', then the statement is
tokenized and parsed and its syntax tree (or the first error) is printed.
"""

import logging
from typing import Callable, Optional

from . import config
from .errors import LexError, ParseError
from .parser import Parser
from .pretty import format_tree
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class REPL:
    """Interactive shell that parses one statement at a time"""

    def __init__(self, input_func: Callable[[str], str] = input, output: Callable[[str], None] = print):
        self.input_func = input_func
        self.output = output
        self.buffer = ''
        self.running = False

    def start(self):
        """Main command loop"""
        self.running = True
        self.output(config.BANNER)

        while self.running:
            prompt = config.CONTINUATION_PROMPT if self.buffer else config.PROMPT
            try:
                line = self.input_func(prompt)
            except KeyboardInterrupt:
                self.buffer = ''
                self.output("\nStatement discarded")
                continue
            except EOFError:
                self.output("")
                break

            result = self.feed_line(line)
            if result is not None:
                self.output(result)

        self.running = False

    def feed_line(self, line: str) -> Optional[str]:
        """Buffer one line; return the outcome once a statement is complete"""
        if line.strip().lower() in config.EXIT_COMMANDS:
            self.running = False
            self.buffer = ''
            return "Exiting."

        self.buffer += line.rstrip() + ' '

        if len(self.buffer) > config.MAX_SQL_LENGTH:
            self.buffer = ''
            return f"Statement exceeds {config.MAX_SQL_LENGTH} characters, discarded"

        if not self.buffer.rstrip().endswith(';'):
            return None

        sql = self.buffer
        self.buffer = ''
        return self.evaluate(sql)

    def evaluate(self, sql: str) -> str:
        """Tokenize and parse sql, rendering the tree or the error"""
        try:
            tokens = tokenize(sql)
        except LexError as e:
            return f"Tokenizer error: {e}"

        try:
            statement = Parser(tokens).parse()
        except ParseError as e:
            return f"Parser error: {e}"

        logger.debug("Parsed %s", type(statement).__name__)
        return f"Parsed successfully:\n{format_tree(statement)}"
