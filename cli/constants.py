"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["split", "join", "config", "clear", "exit", "help"]

CONFIG_KEYS = ("split-size", "join-dir")

STYLE = Style.from_dict(
    {
        "prompt": "#2E9E6B bold",
        "command": "#0088ff bold",
    }
)

GREEN = "\033[38;2;46;158;107m"
RESET = "\033[0m"

LOGO = f"""{GREEN}
 ███████╗██████╗ ██╗     ██╗████████╗████████╗███████╗██████╗
 ██╔════╝██╔══██╗██║     ██║╚══██╔══╝╚══██╔══╝██╔════╝██╔══██╗
 ███████╗██████╔╝██║     ██║   ██║      ██║   █████╗  ██████╔╝
 ╚════██║██╔═══╝ ██║     ██║   ██║      ██║   ██╔══╝  ██╔══██╗
 ███████║██║     ███████╗██║   ██║      ██║   ███████╗██║  ██║
 ╚══════╝╚═╝     ╚══════╝╚═╝   ╚═╝      ╚═╝   ╚══════╝╚═╝  ╚═╝
{RESET}"""

WELCOME_TITLE = "splitter - split files into chunks and join them back"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "splitter> "
SPLIT_SIZE_PROMPT = "Split size:  "

HELP_TEXT = """Available commands:
  split <file> [size]             Split file into chunks smaller than size (asks if omitted)
  join <file> [file ...]          Join chunk files into joined-<name> in the join directory
  join <directory>                Join every file of a split directory
  config                          Show configuration
  config split-size <size|none>   Set (or clear) the default split size
  config join-dir <directory>     Set the directory joined files are written to
  clear                           Clear screen and redisplay welcome message
  help                            Show this help
  exit                            Exit REPL

Sizes accept units: 4096, 500KB, 1.5 MB, 64KiB, 2GiB (KB = 1000 bytes, KiB = 1024 bytes).
Chunks of report.csv are written to report.csv-split/report.csv-split-1, -2, ...
Renaming chunk files changes the order they are joined in.
Examples:
  split videos/holiday.mp4 100MiB
  join videos/holiday.mp4-split
  join part/report.csv-split-1 part/report.csv-split-2"""
