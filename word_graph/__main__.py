"""Package entry point for ``python -m word_graph``.

WHY: Users run the tooling as ``python -m word_graph generate words.txt``
without relying on the installed ``word-graph`` console script.

HOW: Delegates straight to the CLI's main() function.
"""

from word_graph.cli import main

if __name__ == "__main__":
    main()
