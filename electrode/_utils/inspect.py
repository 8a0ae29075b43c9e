"""
This module provides the pseudo-reflection engine that lets `electrode` infer
which dependencies a callable needs. Instead of reading structured signature
metadata, it reads the callable's source text and extracts the declared
parameter names with a handful of regular expressions, the same way the
names would be read by a human looking at the declaration.

Key Functions:
- `reflect_arguments`: Recovers the ordered list of parameter names of a
  callable. It recognises two shapes of declaration:
    * the bracketed form, `def name(a, b):`, where the names sit inside the
      first pair of parentheses;
    * the bare form, `lambda a, b: ...`, where the names sit between the
      `lambda` keyword and its colon without any enclosing parentheses.
  A lambda is first cut out of the statement that holds it, using the
  source positions recorded in its bytecode.
  Comments and triple-quoted strings are removed first so that punctuation in
  them cannot corrupt the extraction, and leading decorator lines are skipped.

Known limitations, kept on purpose because callers rely on the exact output:
- Parameters with default values and variadic parameters are dropped without
  any signal.
- Arguments are split on every comma, so defaults or annotations containing
  commas (`dict[str, int]`) are misparsed.
- The form is chosen by comparing the position of the first `lambda` token
  with the position of the first closing parenthesis. A `def` whose body
  contains a lambda is therefore read as the bare form and fails to parse.
"""

import dis
import inspect
import logging
import re
import textwrap
from collections.abc import Callable

from electrode._errors import ParseError

logger = logging.getLogger(__name__)

# Delimiter between two declared arguments
_ARG_DELIM = re.compile(r",")

# Argument declarations of a lambda, up to its colon
_LAMBDA_ARGS = re.compile(r"^[^(]*?\blambda\b([^(:]*):")

# Interior of the first parenthesis pair
_FN_ARGS = re.compile(r"^[^(]*\(\s*([^)]*)\)")

# Line comments and triple-quoted blocks (which may span several lines)
_COMMENTS = re.compile(r"(#.*$)|(\"\"\"[\s\S]*?\"\"\")|('''[\s\S]*?''')", re.MULTILINE)

# Start of the declaration line, past any decorators
_DEF = re.compile(r"^[ \t]*(?:async[ \t]+)?def\b", re.MULTILINE)

_LAMBDA = re.compile(r"\blambda\b")

# The same keyword, located on the raw bytes of a source line
_LAMBDA_TOKEN = re.compile(rb"\blambda\b")

# Instructions that belong to the frame, not to the body of a lambda
_FRAME_OPS = {"RESUME", "RETURN_VALUE", "RETURN_CONST", "COPY_FREE_VARS", "MAKE_CELL"}

# A single argument name. If the name is wrapped in underscores on both sides
# (`_config_`), group 1 is "_" and group 2 holds the bare name. The wrapping
# avoids naming collisions with the injected component and should be used
# sparingly.
_FN_ARG = re.compile(r"^\s*(_?)(\S+?)\1\s*$")


def _declared_arity(f: Callable) -> int | None:
    """
    Count the parameters of a callable that have no default value and are
    not variadic. Returns None when no signature is available.
    """
    try:
        sig = inspect.signature(f)
    except (TypeError, ValueError):
        return None

    variadic = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    return sum(
        1
        for param in sig.parameters.values()
        if param.default is inspect.Parameter.empty and param.kind not in variadic
    )


def _source_target(f: Callable) -> tuple[Callable, bool]:
    """
    Return the object whose source declares the parameters of `f`, and
    whether that declaration starts with a bound receiver (`self`/`cls`).
    """
    if inspect.isclass(f):
        return f.__init__, True
    if inspect.ismethod(f):
        return f, True
    if inspect.isroutine(f):
        return f, False
    # Callable instance
    return type(f).__call__, True


def _is_lambda(target: Callable) -> bool:
    return getattr(target, "__name__", None) == "<lambda>"


def _body_span(target: Callable) -> tuple[tuple[int, int], tuple[int, int]] | None:
    """
    Return the (line, byte column) bounds of the body of a compiled lambda,
    taken from the source positions of its instructions. Returns None when
    no positions were recorded.
    """
    positions = [
        instr.positions
        for instr in dis.get_instructions(target)
        if instr.opname not in _FRAME_OPS
        and instr.positions is not None
        and None not in instr.positions
    ]
    # Zero-width positions carry no column information
    positions = [
        p
        for p in positions
        if (p.lineno, p.col_offset) != (p.end_lineno, p.end_col_offset)
    ]
    if not positions:
        return None
    start = min((p.lineno, p.col_offset) for p in positions)
    end = max((p.end_lineno, p.end_col_offset) for p in positions)
    return start, end


def _lambda_source(f: Callable, target: Callable) -> str:
    """
    Return the text of the lambda `target` alone, cut out of the statement
    that contains it.

    The lambda is the last `lambda` keyword before the start of its body. The
    text ends where the body ends. Without recorded positions the keyword must
    be the only one in the statement.
    """
    lines, first = inspect.getsourcelines(target)
    encoded = [line.encode() for line in lines]
    keywords = [
        (first + i, m.start())
        for i, line in enumerate(encoded)
        for m in _LAMBDA_TOKEN.finditer(line)
    ]

    span = _body_span(target)
    end = None
    if not keywords:
        raise ParseError(f, "its lambda keyword was not found in its source text")
    if span is None:
        if len(keywords) > 1:
            raise ParseError(f, "several lambdas share its source text")
        line_no, col = keywords[0]
    else:
        body_start, end = span
        candidates = [kw for kw in keywords if kw < body_start]
        if not candidates:
            raise ParseError(f, "its lambda keyword was not found in its source text")
        line_no, col = max(candidates)

    start_idx = line_no - first
    chunk = encoded[start_idx:]
    chunk[0] = chunk[0][col:]
    if end is not None and end[0] - first < len(encoded):
        end_line, end_col = end
        chunk = chunk[: end_line - line_no + 1]
        # The end column counts from the start of the untrimmed line
        offset = col if end_line == line_no else 0
        chunk[-1] = chunk[-1][: end_col - offset]
    return b"".join(chunk).decode()


def _stringify(f: Callable, target: Callable) -> str:
    """Return the dedented source text of `target`."""
    try:
        if _is_lambda(target):
            return _lambda_source(f, target)
        source = inspect.getsource(target)
    except (OSError, TypeError) as e:
        raise ParseError(f, "its source text is not available") from e
    return textwrap.dedent(source)


def _strip_decorators(text: str) -> str:
    """Drop everything before the `def` line, if there is one."""
    match = _DEF.search(text)
    if match is None:
        return text
    return text[match.start() :].lstrip()


def _is_lambda_form(text: str) -> bool:
    """
    Determine if a declaration uses the bare lambda form by checking whether
    the first `lambda` token comes after the first ')'. A missing token
    counts as position -1.
    """
    match = _LAMBDA.search(text)
    lambda_idx = match.start() if match else -1
    return lambda_idx > text.find(")")


def _is_extractable(token: str) -> bool:
    """Tell whether a raw argument token declares a plain positional name."""
    token = token.strip()
    if not token:
        # Trailing comma
        return False
    if token.startswith("*") or token == "/":
        return False
    return "=" not in token


def _normalize_arg(token: str) -> str:
    """Trim a raw argument token, drop its annotation and unwrap `_name_`."""
    name = token.split(":", 1)[0].strip()
    return _FN_ARG.sub(lambda m: m.group(2), name)


def reflect_arguments(f: Callable) -> list[str]:
    """
    Attempts to parse the argument names from a given callable.

    Note: default-valued and variadic arguments are never reported, and for
    bound methods, classes and callable instances the receiver (`self` or
    `cls`) is left out.

    Args:
        f (Callable): Reflection target.

    Returns:
        list[str]: The argument names in declaration order.

    Raises:
        TypeError: If `f` is not callable.
        ParseError: If the source text of `f` is unavailable or has no
            recognizable parameter list.
    """
    if not callable(f):
        raise TypeError(f"Expected a callable, got {type(f).__name__!r}.")

    if _declared_arity(f) == 0:
        logger.debug("%r declares no arguments, skipping source inspection", f)
        return []

    target, bound = _source_target(f)

    # Grab the source text, strip comments and skip decorators
    text = _strip_decorators(_COMMENTS.sub("", _stringify(f, target)))

    lambda_form = _is_lambda_form(text)
    pattern = _LAMBDA_ARGS if lambda_form else _FN_ARGS
    match = pattern.match(text)
    if match is None:
        raise ParseError(
            f,
            f"no {'lambda' if lambda_form else 'bracketed'} parameter list "
            f"found in its source text",
        )

    tokens = _ARG_DELIM.split(match.group(1))
    if bound:
        tokens = tokens[1:]

    names = [_normalize_arg(token) for token in tokens if _is_extractable(token)]
    logger.debug(
        "Reflected arguments of %r (%s form): %s",
        f,
        "lambda" if lambda_form else "bracketed",
        names,
    )
    return names
