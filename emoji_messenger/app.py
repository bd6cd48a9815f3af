"""
Emoji Messenger — GUI + CLI
--------------------------------------------------
Thin front ends over the codec:
  1) GUI (Tkinter): type or paste, Encode / Decode / Auto-Detect, Copy, Load, Save.
  2) CLI: --encode / --decode / --auto with --in/--out files and optional --copy.
The codec only ever sees raw strings; turning a condition into text happens here.
"""

import argparse
import sys
from typing import Callable

import pyperclip
from loguru import logger

from .codec import CodecCondition, CodecResult, decode, encode, looks_like_cipher

try:
    import tkinter as tk
    from tkinter import ttk, filedialog, messagebox
except ImportError:
    tk = None  # headless environments


ENCODE = "encode"
DECODE = "decode"

WARNING_PREFIX = "⚠️"
PLACEHOLDER = "Your result will appear here…"
TOAST_MS = 2500

MESSAGES = {
    (ENCODE, CodecCondition.EMPTY_INPUT): "⚠️ Please type a message first.",
    (DECODE, CodecCondition.EMPTY_INPUT): "⚠️ Please paste an emoji code first.",
    (ENCODE, CodecCondition.NO_SUPPORTED_CHARACTERS): "⚠️ No supported characters found to encode.",
    (DECODE, CodecCondition.NO_DECODABLE_TOKENS): "⚠️ Could not decode. Make sure you pasted a valid emoji code.",
}

NOTHING_TO_COPY = "Nothing to copy!"
COPIED = "Copied to clipboard!"
COPY_FAILED = "Copy failed – please copy manually."


class ClipboardUnavailable(Exception):
    """Raised by clipboard backends when the copy could not be completed."""


# -----------------------------
# Presentation helpers
# -----------------------------

def run_codec(text: str, direction: str) -> CodecResult:
    if direction == ENCODE:
        return encode(text)
    if direction == DECODE:
        return decode(text)
    raise ValueError(f"Unknown direction: {direction!r}")


def auto_direction(text: str) -> str:
    return DECODE if looks_like_cipher(text) else ENCODE


def render(result: CodecResult, direction: str) -> str:
    """Result payload, or the user-facing warning for its condition."""
    if result.ok:
        return result.data
    return MESSAGES.get((direction, result.condition), f"{WARNING_PREFIX} {result.condition.value}")


def is_copyable(text: str) -> bool:
    return bool(text) and text != PLACEHOLDER and not text.startswith(WARNING_PREFIX)


def copy_result(text: str, copy: Callable[[str], None]) -> str:
    """Hand text to a clipboard backend and return the notice to show."""
    if not is_copyable(text):
        return NOTHING_TO_COPY
    try:
        copy(text)
    except ClipboardUnavailable as e:
        logger.warning("Clipboard copy failed: {}", e)
        return COPY_FAILED
    return COPIED


def system_clipboard_copy(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailable(str(e)) from e


# -----------------------------
# GUI
# -----------------------------

class EmojiMessengerApp:
    def __init__(self, root):
        self.root = root
        root.title("Emoji Secret Messenger")
        root.geometry("720x520")
        root.minsize(560, 420)

        self._toast_job = None
        self._build_ui()

    def _build_ui(self):
        frame_top = ttk.Frame(self.root, padding=(10,10,10,0))
        frame_top.pack(fill="both", expand=True)

        ttk.Label(frame_top, text="Message").pack(anchor="w")
        self.input = tk.Text(frame_top, wrap="word", height=8, undo=True)
        self.input.pack(fill="both", expand=True)

        btns_in = ttk.Frame(frame_top)
        btns_in.pack(fill="x", pady=(5,0))
        ttk.Button(btns_in, text="Encode →", command=self.encode_message).pack(side="left")
        ttk.Button(btns_in, text="← Decode", command=self.decode_message).pack(side="left", padx=6)
        ttk.Button(btns_in, text="Auto‑Detect", command=self.auto_detect).pack(side="left", padx=6)
        ttk.Button(btns_in, text="Clear", command=lambda: self.input.delete("1.0", "end")).pack(side="right")
        ttk.Button(btns_in, text="Load…", command=self.load_input).pack(side="right", padx=6)
        ttk.Button(btns_in, text="Paste", command=self.paste_input).pack(side="right")

        frame_mid = ttk.Frame(self.root, padding=10)
        frame_mid.pack(fill="both", expand=True)

        ttk.Label(frame_mid, text="Result").pack(anchor="w")
        self.result = tk.Text(frame_mid, wrap="word", height=8)
        self.result.pack(fill="both", expand=True)
        self.show_result(PLACEHOLDER)

        btns_out = ttk.Frame(frame_mid)
        btns_out.pack(fill="x", pady=(5,0))
        ttk.Button(btns_out, text="Copy", command=self.copy_output).pack(side="left")
        ttk.Button(btns_out, text="Swap", command=self.swap).pack(side="left", padx=6)
        ttk.Button(btns_out, text="Save…", command=self.save_output).pack(side="left", padx=6)

        self.toast = ttk.Label(self.root, text="", anchor="center")
        self.toast.pack(fill="x", pady=(0,10))

    # Actions
    def run(self, direction):
        text = self.input.get("1.0", "end").rstrip("\n")
        res = run_codec(text, direction)
        if not res.ok:
            logger.info("{} condition: {}", direction, res.condition.value)
        self.show_result(render(res, direction))

    def encode_message(self):
        self.run(ENCODE)

    def decode_message(self):
        self.run(DECODE)

    def auto_detect(self):
        self.run(auto_direction(self.input.get("1.0", "end")))

    def swap(self):
        out_text = self.result_text()
        if not is_copyable(out_text):
            self.show_toast("Nothing to swap!")
            return
        self.input.delete("1.0","end")
        self.input.insert("1.0", out_text)
        self.show_result(PLACEHOLDER)

    def paste_input(self):
        try:
            data = self.root.clipboard_get()
        except tk.TclError:
            self.show_toast("Clipboard empty or unavailable.")
            return
        self.input.delete("1.0","end")
        self.input.insert("1.0", data)

    def copy_output(self):
        self.show_toast(copy_result(self.result_text(), self._tk_copy))

    def _tk_copy(self, text):
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append(text)
        except tk.TclError as e:
            raise ClipboardUnavailable(str(e)) from e

    def load_input(self):
        path = filedialog.askopenfilename(title="Load Message", filetypes=[("Text Files","*.txt *.md"),("All Files","*.*")])
        if not path:
            return
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = f.read()
        except (OSError, UnicodeDecodeError) as e:
            messagebox.showerror("Load Error", str(e))
            return
        self.input.delete("1.0","end")
        self.input.insert("1.0", data)
        self.show_toast(f"Loaded: {path}")

    def save_output(self):
        out_text = self.result_text()
        if not is_copyable(out_text):
            self.show_toast("Nothing to save!")
            return
        path = filedialog.asksaveasfilename(title="Save Result", defaultextension=".txt", filetypes=[("Text Files","*.txt"),("All Files","*.*")])
        if not path:
            return
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(out_text)
        except OSError as e:
            messagebox.showerror("Save Error", str(e))
            return
        self.show_toast(f"Saved: {path}")

    def result_text(self):
        return self.result.get("1.0","end").rstrip("\n")

    def show_result(self, s: str):
        self.result.config(state="normal")
        self.result.delete("1.0","end")
        self.result.insert("1.0", s)
        self.result.config(state="disabled")

    def show_toast(self, msg):
        self.toast.config(text=msg)
        if self._toast_job is not None:
            self.root.after_cancel(self._toast_job)
        self._toast_job = self.root.after(TOAST_MS, self._hide_toast)

    def _hide_toast(self):
        self._toast_job = None
        self.toast.config(text="")


# -----------------------------
# CLI
# -----------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Emoji Secret Messenger (GUI + CLI)")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--encode", action="store_true", help="Encode text to emojis")
    g.add_argument("--decode", action="store_true", help="Decode emojis back to text")
    g.add_argument("--auto", action="store_true", help="Decode if the input is an emoji code, else encode")
    p.add_argument("--in", dest="infile", default="-", help="Input file path or '-' for stdin")
    p.add_argument("--out", dest="outfile", default="-", help="Output file path or '-' for stdout")
    p.add_argument("--copy", action="store_true", help="Also copy the result to the system clipboard")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    return p


def configure_logging(verbose: bool = False) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def run_cli(argv, copy: Callable[[str], None] = system_clipboard_copy) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if not (args.encode or args.decode or args.auto):
        print("Specify --encode, --decode or --auto. Launching GUI instead...", file=sys.stderr)
        launch_gui()
        return 0

    if args.infile == "-":
        data = sys.stdin.read()
    else:
        with open(args.infile, "r", encoding="utf-8") as f:
            data = f.read()

    if args.auto:
        direction = auto_direction(data)
    else:
        direction = ENCODE if args.encode else DECODE
    logger.info("Running {} on {} character(s)", direction, len(data))

    res = run_codec(data, direction)
    if not res.ok:
        print(render(res, direction), file=sys.stderr)
        return 2

    if args.outfile == "-":
        sys.stdout.write(res.data + "\n")
    else:
        with open(args.outfile, "w", encoding="utf-8") as f:
            f.write(res.data)

    if args.copy:
        print(copy_result(res.data, copy), file=sys.stderr)
    return 0


def launch_gui():
    if tk is None:
        print("Tkinter not available. Use CLI flags: --encode/--decode/--auto", file=sys.stderr)
        sys.exit(1)
    root = tk.Tk()
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")
    EmojiMessengerApp(root)
    root.mainloop()


def main():
    if len(sys.argv) > 1:
        sys.exit(run_cli(sys.argv[1:]))
    else:
        configure_logging()
        launch_gui()


if __name__ == "__main__":
    main()
