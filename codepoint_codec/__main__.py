"""Package entry point for ``python -m codepoint_codec``.

WHY: Users run the codec as ``python -m codepoint_codec encode U+1F600``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
HTTP API with uvicorn. Otherwise, delegates to the CLI's main().
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from codepoint_codec.server.app import run_api
        run_api()
    else:
        from codepoint_codec.cli import main
        main()
