"""
Desktop form for IPCheck

Run with:
    ipcheck-gui
"""

import tkinter as tk
from tkinter import ttk
from tkinter.scrolledtext import ScrolledText

from .analysis import SystemResolver
from .form import FormController
from .log import setup_logging


class CheckerWindow:
    """
    IP Address Checker window.

    Layout: input row (label, entry, Check IP, Clear) above a read-only
    result area. Enter in the entry triggers a check.
    """

    TITLE = "IP Address Checker"
    MIN_SIZE = (500, 400)

    def __init__(self, root: tk.Tk, controller: FormController):
        self.root = root
        self.controller = controller

        self.root.title(self.TITLE)
        self.root.minsize(*self.MIN_SIZE)

        self.address_var = tk.StringVar()
        self._build()

    def _build(self):
        input_frame = ttk.Frame(self.root, padding=8)
        input_frame.pack(side=tk.TOP, fill=tk.X)

        ttk.Label(input_frame, text="IP Address:").pack(side=tk.LEFT)
        self.entry = ttk.Entry(input_frame, textvariable=self.address_var, width=40)
        self.entry.pack(side=tk.LEFT, padx=6, fill=tk.X, expand=True)
        self.entry.bind("<Return>", lambda _event: self.on_check())

        ttk.Button(input_frame, text="Check IP", command=self.on_check).pack(side=tk.LEFT)
        ttk.Button(input_frame, text="Clear", command=self.on_clear).pack(side=tk.LEFT, padx=(6, 0))

        result_frame = ttk.LabelFrame(self.root, text="IP Address Information", padding=4)
        result_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=(0, 8))

        self.result_area = ScrolledText(result_frame, height=15, width=60,
                                        font=("Courier", 11), state=tk.DISABLED)
        self.result_area.pack(fill=tk.BOTH, expand=True)

        self.entry.focus_set()

    def _show(self, text: str):
        self.result_area.configure(state=tk.NORMAL)
        self.result_area.delete("1.0", tk.END)
        self.result_area.insert("1.0", text)
        self.result_area.configure(state=tk.DISABLED)
        self.result_area.see("1.0")

    def on_check(self):
        self._show(self.controller.check(self.address_var.get()))

    def on_clear(self):
        self.address_var.set("")
        self._show(self.controller.clear())
        self.entry.focus_set()


def main():
    setup_logging()

    root = tk.Tk()
    CheckerWindow(root, FormController(resolver_factory=SystemResolver))
    root.mainloop()


if __name__ == '__main__':
    main()
