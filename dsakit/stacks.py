"""A bounded stack and stack-based expression utilities."""

from __future__ import annotations

from typing import Callable, Dict, Iterator, List


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[int] = []

    def push(self, value) -> None:
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self):
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self):
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Yield values from top to bottom."""
        return reversed(self._items)


def reverse_sentence(sentence: str) -> str:
    """The words of ``sentence`` in reverse order, joined by single spaces."""
    return " ".join(reversed(sentence.split()))


def reverse_stack(stack: list) -> None:
    """Reverse a list used as a stack (top at the end) in place."""
    stack.reverse()


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _power(a: int, b: int) -> int:
    return a**b if b >= 0 else int(a**b)


_PREFIX_OPS: Dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
    "^": lambda a, b: a ^ b,
}

_POSTFIX_OPS: Dict[str, Callable[[int, int], int]] = {
    **_PREFIX_OPS,
    "^": _power,
}


def _pop_operand(stack: List[int], expression: str) -> int:
    if not stack:
        raise ValueError(f"malformed expression: {expression!r}")
    return stack.pop()


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single-digit operands.

    Division truncates toward zero and ``^`` is bitwise exclusive or.
    """
    stack: List[int] = []
    for char in reversed(expression):
        if char.isdigit():
            stack.append(int(char))
            continue
        operation = _PREFIX_OPS.get(char)
        if operation is None:
            raise ValueError(f"unknown operator {char!r}")
        first = _pop_operand(stack, expression)
        second = _pop_operand(stack, expression)
        stack.append(operation(first, second))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero and ``^`` is exponentiation.
    """
    stack: List[int] = []
    for char in expression:
        if char.isdigit():
            stack.append(int(char))
            continue
        operation = _POSTFIX_OPS.get(char)
        if operation is None:
            raise ValueError(f"unknown operator {char!r}")
        second = _pop_operand(stack, expression)
        first = _pop_operand(stack, expression)
        stack.append(operation(first, second))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def precedence(operator: str) -> int:
    """Binding strength of an operator; -1 for anything else."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return -1


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression with letter operands to postfix.

    An operator pops only operators of strictly higher precedence.
    """
    stack: List[str] = []
    result: List[str] = []
    for char in expression:
        if char.isascii() and char.isalpha():
            result.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                result.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) > precedence(char):
                result.append(stack.pop())
            stack.append(char)
    result.extend(reversed(stack))
    return "".join(result)