"""Classic data structures and algorithms: sorting, searching, strings, stacks, queues, lists, trees and graphs."""

__version__ = "0.1.0"