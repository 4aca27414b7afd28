"""Classic data structures and algorithms in plain Python.

Modules: arrays, queues, stacks, dp, counting, maze, bst, trie, graph,
greedy and linked_list.
"""

__version__ = "0.1.0"