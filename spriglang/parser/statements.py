"""
Statement parsing utilities for Sprig.

These functions operate on a `spriglang.parser.parser.Parser` instance and
handle the various statement forms in the language such as blocks,
conditionals, loops, and function definitions.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from spriglang import ast
from spriglang.exceptions import ParseError
from spriglang.lexer import TokenKind

if TYPE_CHECKING:
    from spriglang.parser import Parser


def parse_block(parser: 'Parser') -> ast.Block:
    """
    Parse a block of statements enclosed in braces.

    Args:
        parser: The parser instance.

    Returns:
        Block: The statements between ``{`` and ``}``.
    """
    tok = parser.eat(TokenKind.PUNCTUATION, '{')
    statements = []
    while not parser.check(TokenKind.PUNCTUATION, '}'):
        if parser.check(TokenKind.EOF):
            raise parser.error("Expected punctuation '}'")
        statements.append(parser.statement())
    parser.eat(TokenKind.PUNCTUATION, '}')
    return ast.Block(tuple(statements), line=tok.line, column=tok.column)


def parse_statement(parser: 'Parser') -> ast.Stmt:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        Stmt: The AST node for the statement.
    """
    tok = parser.curr_token
    if tok.type is TokenKind.KEYWORD:
        if tok.lexeme == 'let':
            return parser.parse_let()
        elif tok.lexeme == 'fn':
            return parser.parse_func_def()
        elif tok.lexeme == 'print':
            return parser.parse_print()
        elif tok.lexeme == 'if':
            return parser.parse_if()
        elif tok.lexeme == 'while':
            return parser.parse_while()
        elif tok.lexeme == 'return':
            return parser.parse_return()
        elif tok.lexeme == 'break':
            return parser.parse_break()
        elif tok.lexeme == 'continue':
            return parser.parse_continue()
    elif tok.matches(TokenKind.PUNCTUATION, '{'):
        return parser.block()
    return parser.parse_expression_statement()


def parse_let(parser: 'Parser') -> ast.VariableDeclaration:
    """
    Parse a variable declaration.

    Syntax:
        let <name> [= <expression>];
    """
    tok = parser.eat(TokenKind.KEYWORD, 'let')
    if not parser.check(TokenKind.IDENTIFIER):
        raise parser.error("Expected identifier after 'let'")
    name = parser.advance().lexeme
    initializer = None
    if parser.check(TokenKind.OPERATOR, '='):
        parser.advance()
        initializer = parser.expr()
    parser.eat(TokenKind.PUNCTUATION, ';')
    return ast.VariableDeclaration(name, initializer, line=tok.line, column=tok.column)


def parse_print(parser: 'Parser') -> ast.Print:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression>;
    """
    tok = parser.eat(TokenKind.KEYWORD, 'print')
    expr_node = parser.expr()
    parser.eat(TokenKind.PUNCTUATION, ';')
    return ast.Print(expr_node, line=tok.line, column=tok.column)


def parse_if(parser: 'Parser') -> ast.If:
    """
    Parse a conditional 'if' statement with an optional else branch.

    ``else if`` chains nest: the else branch is itself an `If` node.
    """
    tok = parser.eat(TokenKind.KEYWORD, 'if')
    condition = parser.expr()
    then_block = parser.block()

    else_branch = None
    if parser.check(TokenKind.KEYWORD, 'else'):
        parser.advance()
        if parser.check(TokenKind.KEYWORD, 'if'):
            else_branch = parser.parse_if()
        else:
            else_branch = parser.block()

    return ast.If(condition, then_block, else_branch, line=tok.line, column=tok.column)


def parse_while(parser: 'Parser') -> ast.While:
    """
    Parse a 'while' loop.
    """
    tok = parser.eat(TokenKind.KEYWORD, 'while')
    condition = parser.expr()
    parser.loop_depth += 1
    try:
        body = parser.block()
    finally:
        parser.loop_depth -= 1
    return ast.While(condition, body, line=tok.line, column=tok.column)


def parse_break(parser: 'Parser') -> ast.Break:
    """
    Parse a 'break' control statement.
    """
    tok = parser.curr_token
    if parser.loop_depth == 0:
        raise ParseError("'break' outside loop", tok, parser.source_file)
    parser.advance()
    parser.eat(TokenKind.PUNCTUATION, ';')
    return ast.Break(line=tok.line, column=tok.column)


def parse_continue(parser: 'Parser') -> ast.Continue:
    """
    Parse a 'continue' control statement.
    """
    tok = parser.curr_token
    if parser.loop_depth == 0:
        raise ParseError("'continue' outside loop", tok, parser.source_file)
    parser.advance()
    parser.eat(TokenKind.PUNCTUATION, ';')
    return ast.Continue(line=tok.line, column=tok.column)


def parse_func_def(parser: 'Parser') -> ast.FunctionDeclaration:
    """
    Parse a function definition.

    Syntax:
        fn <name>(<param>, ...) { <statements> }
    """
    start_tok = parser.eat(TokenKind.KEYWORD, 'fn')
    if not parser.check(TokenKind.IDENTIFIER):
        raise parser.error("Expected function name after 'fn'")
    func_name = parser.advance().lexeme
    parser.eat(TokenKind.PUNCTUATION, '(')
    params = []
    if not parser.check(TokenKind.PUNCTUATION, ')'):
        while True:
            param_tok = parser.eat(TokenKind.IDENTIFIER)
            if param_tok.lexeme in params:
                raise ParseError(
                    f"Duplicate parameter '{param_tok.lexeme}' in function '{func_name}'",
                    param_tok,
                    parser.source_file,
                )
            params.append(param_tok.lexeme)
            if not parser.check(TokenKind.PUNCTUATION, ','):
                break
            parser.advance()
    parser.eat(TokenKind.PUNCTUATION, ')')

    # A loop around the definition does not make 'break' legal inside the body.
    saved_loops = parser.loop_depth
    parser.loop_depth = 0
    parser.function_depth += 1
    try:
        body = parser.block()
    finally:
        parser.function_depth -= 1
        parser.loop_depth = saved_loops
    return ast.FunctionDeclaration(func_name, tuple(params), body, line=start_tok.line, column=start_tok.column)


def parse_return(parser: 'Parser') -> ast.Return:
    """
    Parse a 'return' statement.

    Syntax:
        return [<expression>];
    """
    tok = parser.curr_token
    if parser.function_depth == 0:
        raise ParseError("'return' outside function", tok, parser.source_file)
    parser.advance()
    value = None
    if not parser.check(TokenKind.PUNCTUATION, ';'):
        value = parser.expr()
    parser.eat(TokenKind.PUNCTUATION, ';')
    return ast.Return(value, line=tok.line, column=tok.column)


def parse_expression_statement(parser: 'Parser') -> ast.ExpressionStatement:
    """
    Parse an expression followed by ';'.
    """
    tok = parser.curr_token
    expr_node = parser.expr()
    parser.eat(TokenKind.PUNCTUATION, ';')
    return ast.ExpressionStatement(expr_node, line=tok.line, column=tok.column)
