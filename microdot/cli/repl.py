"""
    REPL — read a line, run it, print the result, keep the files current.
"""
from typing import Callable, Optional

from .command_processor import CommandProcessor

PROMPT = ">> "


def run_repl(processor: CommandProcessor,
             read: Optional[Callable[[str], str]] = None,
             write: Optional[Callable[[str], None]] = None) -> None:
    """
    Run the interactive loop until ``exit``, end of input or Ctrl-C.

    After every command that changed the graph, or moved the search
    highlight, the snapshot and DOT file are rewritten
    (``config.auto_save``) and the diagram re-rendered (``config.render_svg``).

    Args:
        processor: Parses and runs each line.
        read:      Prompt-and-read function (defaults to ``input``).
        write:     Output function (defaults to ``print``).
    """
    read = read or input
    write = write or print
    config = processor.config

    while True:
        try:
            line = read(PROMPT)
        except EOFError:
            write("CTRL-D")
            break
        except KeyboardInterrupt:
            write("CTRL-C")
            break

        if not line.strip():
            continue

        result = processor.process(line)
        if result.message:
            write(result.message if result.success else f"Error: {result.message}")

        if result.data.get("action") == "exit":
            break

        if result.redraw and config.auto_save:
            saved = processor.save(render=config.render_svg)
            if not saved.success:
                write(f"Warning: {saved.message}")
