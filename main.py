import sys
import curses

from blink_ticker import BlinkTicker
from config_paths import load_config
from converter_model import ConverterModel
from orchestrator import Orchestrator
from radix import Base, InvariantError

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


USAGE = (
    "radixterm - interactive binary/octal/decimal/hex converter\n\n"
    "Usage:\n  radixterm\n  radixterm -v\n\n"
    "Keys:\n"
    "  0-9 a-f       type digits valid for the active base\n"
    "  h/l, arrows   move the cursor\n"
    "  j/k, arrows   switch base\n"
    "  backspace     delete before the cursor\n"
    "  q, Ctrl+C     quit\n"
)


def build_session(cfg):
    start_base = Base.from_label(cfg.get("START_BASE")) or Base.DECIMAL
    model = ConverterModel(start_base)
    ticker = BlinkTicker(
        interval=cfg.get("BLINK_INTERVAL_MS", 530) / 1000.0,
        enabled=cfg.get("BLINK", True),
    )
    return model, ticker


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args:
        print(USAGE)
        return 0

    cfg = load_config()
    model, ticker = build_session(cfg)

    def curses_main(stdscr):
        Orchestrator(stdscr, model, ticker, show_status=cfg.get("SHOW_STATUS", True)).run()

    try:
        curses.wrapper(curses_main)
    except KeyboardInterrupt:
        return 0
    except InvariantError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"Error occurred: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
