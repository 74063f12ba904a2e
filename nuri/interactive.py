import sys

from .errors import NuriError
from .export import format_preview
from .palette.assign import SLOT_NAMES
from .session import CHROMA_STEP, LIGHTNESS_STEP

HELP = """Commands:
  s N     select slot N (0-15)
  l+ l-   lighten / darken the selected slot
  c+ c-   raise / lower chroma of the selected slot
  n p     cycle the selected slot to the next / previous extracted color
  m       switch dark/light mode
  r       regenerate with a new seed
  w       write the theme
  q       quit
  ?       show this help"""


def _write(session, backend, theme_name, save, out):
    try:
        path = save(session.palette)
    except NuriError as e:
        print(f"error: {e}", file=out)
        return
    session.mark_saved()
    print(f"Saved {backend.name} theme '{theme_name}' to {path}", file=out)


def run(session, backend, theme_name, save, input_func=input, out=None):
    """Drive a RefinementSession from line commands.

    Args:
        session: RefinementSession to edit
        backend: ThemeBackend used for the saved theme
        theme_name: Theme name
        save: Callable taking the palette and returning the written path
        input_func: Reads one command line (default: input)
        out: Output stream (default: sys.stdout)
    """
    if out is None:
        out = sys.stdout

    print(HELP, file=out)
    while True:
        print(format_preview(session.palette, session.selected_slot), file=out)
        status = f"[{session.mode.value}{' *' if session.dirty else ''}]"
        try:
            line = input_func(f"{status} nuri> ")
        except EOFError:
            line = "q"

        parts = line.strip().split()
        if not parts:
            continue
        command, args = parts[0], parts[1:]

        try:
            if command == "q":
                if session.dirty:
                    print("Quitting with unsaved changes.", file=out)
                return session.palette
            elif command == "?":
                print(HELP, file=out)
            elif command == "s":
                if not args:
                    print("usage: s N", file=out)
                    continue
                session.select(args[0])
                print(f"Selected {session.selected_slot}:{SLOT_NAMES[session.selected_slot]}", file=out)
            elif command == "l+":
                session.nudge_lightness()
            elif command == "l-":
                session.nudge_lightness(-LIGHTNESS_STEP)
            elif command == "c+":
                session.nudge_chroma()
            elif command == "c-":
                session.nudge_chroma(-CHROMA_STEP)
            elif command == "n":
                session.cycle_candidate(1)
            elif command == "p":
                session.cycle_candidate(-1)
            elif command == "m":
                session.switch_mode()
            elif command == "r":
                session.regenerate()
            elif command == "w":
                _write(session, backend, theme_name, save, out)
            else:
                print(f"unknown command {command!r}, type ? for help", file=out)
        except ValueError as e:
            print(f"error: {e}", file=out)
