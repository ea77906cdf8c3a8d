"""Package entry point for ``python -m figma_swiftui``.

WHY: Users run the converter as ``python -m figma_swiftui nodes.json``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

from figma_swiftui.cli import main

if __name__ == "__main__":
    main()
