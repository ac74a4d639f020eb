"""
Sprig Language Interpreter

This is the main entry point for the Sprig language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Errors are written to standard error with the offending source line, and the
process exits with status 1. Unbounded recursion exhausts the host stack and
exits with status 2.

Environment:
    SPRIGDEBUG              Print tokens and AST before running, and log at DEBUG level.
    SPRIG_RECURSION_LIMIT   Override the host recursion limit.
"""
import logging
import os
import sys

from spriglang.exceptions import ParseError, SprigError, format_error
from spriglang.interpreter import Interpreter
from spriglang.lexer import tokenize
from spriglang.parser import Parser

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FATAL = 2


def print_usage():
    """
    Print usage.
    """
    print()
    print("Sprig Language Interpreter")
    print()
    print("Usage:")
    print("    sprig <script.sprig>")
    print()
    print("Arguments:")
    print("    <script.sprig>")
    print("        Path to a Sprig source file to execute.")
    print()
    print("Example:")
    print("    sprig hello.sprig")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def configure():
    """
    Apply settings taken from the environment.
    """
    if os.environ.get('SPRIGDEBUG'):
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s: %(message)s",
        )
    limit = os.environ.get('SPRIG_RECURSION_LIMIT')
    if limit:
        try:
            sys.setrecursionlimit(int(limit))
        except ValueError:
            print(f"Ignoring invalid SPRIG_RECURSION_LIMIT '{limit}'", file=sys.stderr)


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n", file=sys.stderr)
    print(tokens, file=sys.stderr)
    print("\nAST:\n", file=sys.stderr)
    for stmt in ast:
        print(stmt, file=sys.stderr)
    print(" ", file=sys.stderr)


def report_fatal():
    """
    Report host stack exhaustion.
    """
    print("Fatal: stack exhausted (recursion too deep)", file=sys.stderr)


def run_source(code: str, script_name: str, interpreter: Interpreter | None = None) -> int:
    """
    Run Sprig source code and return the process exit status.
    """
    try:
        interpreter = interpreter if interpreter is not None else Interpreter(script_name)
        tokens = tokenize(code, script_name)
        parser = Parser(tokens, script_name)
        ast = parser.parse()

        if os.environ.get('SPRIGDEBUG'):
            debug_print_tokens_ast(tokens, ast)

        interpreter.run(ast)
    except SprigError as e:
        sys.stdout.flush()
        print(format_error(e, code), file=sys.stderr)
        return EXIT_ERROR
    except RecursionError:
        sys.stdout.flush()
        report_fatal()
        return EXIT_FATAL
    return EXIT_OK


def run_script(script_name: str) -> int:
    """
    Run a Sprig script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return EXIT_ERROR
    return run_source(code, script_name)


def run_repl() -> int:
    """
    Run the interactive REPL
    """
    print("Sprig Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                ast = Parser(tokenize(source, "<stdin>"), "<stdin>").parse()
            except ParseError as e:
                # An error at end of input means the statement is incomplete
                if e.at_eof:
                    continue
                print(format_error(e, source), file=sys.stderr)
                buffer.clear()
                continue
            except SprigError as e:
                print(format_error(e, source), file=sys.stderr)
                buffer.clear()
                continue
            except RecursionError:
                report_fatal()
                return EXIT_FATAL
            buffer.clear()
            try:
                interpreter.run(ast)
            except SprigError as e:
                print(format_error(e, source), file=sys.stderr)
            except RecursionError:
                report_fatal()
                return EXIT_FATAL
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break
    return EXIT_OK


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    configure()
    args = argv[1:]
    if not args:
        return run_repl()
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return EXIT_OK
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return EXIT_ERROR


def cli() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
