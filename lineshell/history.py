import sys

try:
    import readline
except ImportError:
    readline = None


class History:
    """Append-only, in-memory list of every line read by one shell."""

    def __init__(self):
        self._lines = []

    def record(self, line):
        """Thêm một dòng vào history"""
        self._lines.append(line)

    def for_each(self, callback):
        """Call callback(index, line) for every entry, index starting at 1"""
        for i, line in enumerate(self._lines, start=1):
            callback(i, line)

    def __len__(self):
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)


def init_readline():
    """Cấu hình readline để hoạt động giống terminal Linux"""
    if readline is None:
        return
    try:
        if not sys.stdin.isatty():
            return

        # Phím mũi tên lên/xuống
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right để nhảy giữa các từ
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        # Emacs key bindings
        readline.parse_and_bind("set editing-mode emacs")

    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)
