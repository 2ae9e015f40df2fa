"""Sorting algorithms, linked-list sorting, thread pools and a console notepad."""

__version__ = "0.1.0"
__all__ = ["sorting", "linked_list", "thread_pool", "notepad", "console"]