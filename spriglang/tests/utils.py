"""
Utility functions shared across Sprig Language tests.
"""
import io

from spriglang.interpreter import Interpreter
from spriglang.lexer import tokenize
from spriglang.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    tokens = tokenize(source, "<test>")
    parser = Parser(tokens, "<test>")
    return parser.parse()


def run_source(source: str, stdin: str = "") -> list[str]:
    """
    Run source code and return the printed lines.
    """
    out = io.StringIO()
    interpreter = Interpreter("<test>", out=out, stdin=io.StringIO(stdin))
    interpreter.run(parse_source(source))
    return out.getvalue().splitlines()
