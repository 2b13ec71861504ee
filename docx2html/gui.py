"""
Contains the code for the graphical user interface (GUI).
"""
import logging
import threading
import queue
import re
import os
import platform
import subprocess
from pathlib import Path

import tkinter as tk
from tkinter import ttk, filedialog, messagebox, colorchooser

try:
    from tkinterdnd2 import DND_FILES, TkinterDnD
except ImportError:
    TkinterDnD = None

from .utils.config import StyleOptions
from .utils.structures import BatchSummary, ConversionResult
from .utils.logger import setup_main_logger, LOG_DIR
from .core.presets import apply_preset, preset_names
from .core.session import (
    ConversionSession, PreconditionError, SelectionError, default_output_dir,
    find_word_documents,
)
from .resources.loader_gui import make_status_mark, make_swatch, parse_color

log = logging.getLogger("docx2html")


def open_path(path: Path):
    """Opens a file or directory in the system's default explorer."""
    try:
        if platform.system() == "Windows":
            os.startfile(path)
        elif platform.system() == "Darwin":
            subprocess.Popen(["open", str(path)])
        else:
            subprocess.Popen(["xdg-open", str(path)])
    except Exception as e:
        log.error(f"Failed to open path {path}: {e}")


# (field, label) pairs per section of the style dialog
TEXT_FIELDS = [("font_family", "Font family:")]
INT_FIELDS = {
    "font_size": ("Font size (px):", 8, 72),
    "page_margin": ("Page margin (px):", 0, 200),
    "heading_margin": ("Heading margin (px):", 0, 100),
    "table_padding": ("Cell padding (px):", 0, 50),
    "image_max_width": ("Image max width (%):", 10, 200),
}
FLOAT_FIELDS = {"line_height": ("Line height:", 1.0, 3.0)}
COLOR_FIELDS = {
    "text_color": "Text color:",
    "heading_color": "Heading color:",
    "table_border_color": "Border color:",
    "table_header_bg": "Header background:",
}
BOOL_FIELDS = {
    "heading_bold": "Bold headings",
    "heading_underline": "Underline headings",
    "table_striped": "Striped rows",
    "preserve_images": "Keep images",
    "image_responsive": "Responsive images",
    "image_center": "Center images",
    "preserve_styles": "Keep original styles",
    "preserve_lists": "Keep list formatting",
    "preserve_links": "Keep hyperlinks",
    "add_page_breaks": "Page break helper",
}
SECTIONS = [
    ("Typography", ["font_family", "font_size", "line_height", "page_margin", "text_color"]),
    ("Headings", ["heading_color", "heading_margin", "heading_bold", "heading_underline"]),
    ("Tables", ["table_border_color", "table_header_bg", "table_padding", "table_striped"]),
    ("Images", ["preserve_images", "image_max_width", "image_responsive", "image_center"]),
    ("Structure", ["preserve_styles", "preserve_lists", "preserve_links", "add_page_breaks"]),
]


class StyleDialog(tk.Toplevel):
    """A dialog for configuring style options and applying presets."""
    def __init__(self, parent, options: StyleOptions):
        super().__init__(parent)
        self.withdraw() # Start hidden
        self.transient(parent)
        self.title("Style Settings")
        self.options: StyleOptions = options
        self.result: StyleOptions | None = None

        self.vars: dict[str, tk.Variable] = {}
        self.swatches: dict[str, ttk.Label] = {}
        self.preset_var = tk.StringVar()

        body = ttk.Frame(self, padding="10")
        body.pack(padx=5, pady=5, fill=tk.BOTH, expand=True)
        self._create_widgets(body)
        self._load_options(self.options)

        # Center without flash
        self._center_window(parent)
        self.deiconify() # Show only after geometry is set

        self.grab_set()
        self.protocol("WM_DELETE_WINDOW", self.on_cancel)
        self.resizable(False, False)
        self.wait_window(self)

    def _center_window(self, parent):
        self.update_idletasks()
        width = self.winfo_reqwidth()
        height = self.winfo_reqheight()

        parent_x = parent.winfo_rootx()
        parent_y = parent.winfo_rooty()
        parent_width = parent.winfo_width()
        parent_height = parent.winfo_height()

        x = parent_x + (parent_width // 2) - (width // 2)
        y = parent_y + (parent_height // 2) - (height // 2)
        self.geometry(f"{width}x{height}+{x}+{y}")

    def _create_widgets(self, parent):
        preset_frame = ttk.Frame(parent)
        preset_frame.pack(fill=tk.X, pady=(0, 8))
        ttk.Label(preset_frame, text="Preset:").pack(side=tk.LEFT)
        ttk.Combobox(preset_frame, textvariable=self.preset_var, values=preset_names(),
                     state="readonly", width=16).pack(side=tk.LEFT, padx=5)
        ttk.Button(preset_frame, text="Apply", command=self.on_apply_preset).pack(side=tk.LEFT)

        grid = ttk.Frame(parent)
        grid.pack(fill=tk.BOTH, expand=True)
        for i, (title, names) in enumerate(SECTIONS):
            frame = ttk.LabelFrame(grid, text=title, padding="5")
            frame.grid(row=i // 2, column=i % 2, sticky=tk.NSEW, padx=4, pady=4)
            for row, name in enumerate(names):
                self._add_field(frame, row, name)

        css_frame = ttk.LabelFrame(parent, text="Custom CSS", padding="5")
        css_frame.pack(fill=tk.BOTH, expand=True, pady=(4, 0))
        self.css_text = tk.Text(css_frame, height=6, width=60, wrap=tk.NONE)
        self.css_text.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        ttk.Button(css_frame, text="Load...", command=self.on_load_css).pack(side=tk.LEFT, anchor=tk.N, padx=5)

        btn_frame = ttk.Frame(parent)
        btn_frame.pack(fill=tk.X, pady=(10, 0))
        ttk.Button(btn_frame, text="Cancel", command=self.on_cancel).pack(side=tk.RIGHT, padx=5)
        ttk.Button(btn_frame, text="OK", command=self.on_ok).pack(side=tk.RIGHT)

    def _add_field(self, frame, row, name):
        def add_row(label, widget):
            ttk.Label(frame, text=label).grid(row=row, column=0, sticky=tk.W, pady=2)
            widget.grid(row=row, column=1, sticky=tk.W, pady=2, padx=5)

        if name in BOOL_FIELDS:
            var = self.vars[name] = tk.BooleanVar()
            ttk.Checkbutton(frame, text=BOOL_FIELDS[name], variable=var).grid(
                row=row, column=0, columnspan=2, sticky=tk.W, pady=2)
        elif name in INT_FIELDS:
            label, lo, hi = INT_FIELDS[name]
            var = self.vars[name] = tk.IntVar()
            add_row(label, ttk.Spinbox(frame, from_=lo, to=hi, textvariable=var, width=6))
        elif name in FLOAT_FIELDS:
            label, lo, hi = FLOAT_FIELDS[name]
            var = self.vars[name] = tk.DoubleVar()
            add_row(label, ttk.Spinbox(frame, from_=lo, to=hi, increment=0.1, textvariable=var, width=6))
        elif name in COLOR_FIELDS:
            var = self.vars[name] = tk.StringVar()
            cell = ttk.Frame(frame)
            ttk.Entry(cell, textvariable=var, width=10).pack(side=tk.LEFT)
            swatch = self.swatches[name] = ttk.Label(cell)
            swatch.pack(side=tk.LEFT, padx=4)
            ttk.Button(cell, text="...", width=3,
                       command=lambda n=name: self.on_pick_color(n)).pack(side=tk.LEFT)
            var.trace_add("write", lambda *_, n=name: self._update_swatch(n))
            add_row(COLOR_FIELDS[name], cell)
        else:
            var = self.vars[name] = tk.StringVar()
            add_row(dict(TEXT_FIELDS)[name], ttk.Entry(frame, textvariable=var, width=28))

    def _update_swatch(self, name):
        img = make_swatch(self.vars[name].get())
        label = self.swatches[name]
        label.configure(image=img)
        label.image = img  # keep a reference

    def _load_options(self, options: StyleOptions):
        for name, var in self.vars.items():
            var.set(getattr(options, name))
        self.css_text.delete("1.0", tk.END)
        self.css_text.insert("1.0", options.custom_css)

    def _collect_options(self) -> StyleOptions:
        """Builds StyleOptions from the form. Raises ValueError/TclError on bad numbers."""
        values = {name: var.get() for name, var in self.vars.items()}
        values["custom_css"] = self.css_text.get("1.0", "end-1c")
        return StyleOptions.from_dict(values)

    def on_apply_preset(self):
        name = self.preset_var.get()
        if not name:
            return
        try:
            current = self._collect_options()
        except (ValueError, tk.TclError):
            current = self.options
        self._load_options(apply_preset(current, name))

    def on_pick_color(self, name):
        current = self.vars[name].get()
        initial = current if parse_color(current) else None
        _, hex_color = colorchooser.askcolor(initialcolor=initial, parent=self)
        if hex_color:
            self.vars[name].set(hex_color)

    def on_load_css(self):
        file = filedialog.askopenfilename(
            parent=self, filetypes=[("CSS Files", "*.css"), ("All Files", "*.*")]
        )
        if not file:
            return
        try:
            css = Path(file).read_text(encoding="utf-8")
        except OSError as e:
            messagebox.showerror("Error", f"Cannot read {file}: {e}", parent=self)
            return
        self.css_text.insert(tk.END, css)

    def on_ok(self):
        try:
            self.result = self._collect_options()
            self.on_cancel()
        except (ValueError, tk.TclError):
            messagebox.showerror("Invalid Input", "Please enter valid numbers.", parent=self)

    def on_cancel(self):
        self.grab_release()
        self.destroy()


class ConverterApp:
    def __init__(self, root):
        self.root = root
        self.root.title("Word to HTML Converter")
        self.root.geometry("900x600")

        setup_main_logger(logging.INFO)

        self.session = ConversionSession(output_dir=default_output_dir())
        self.queue = queue.Queue()
        self.conversion_thread: threading.Thread | None = None

        self.file_map: dict[str, str] = {}     # str(path) -> tree item id
        self.batch_items: list[str] = []       # item ids in batch order

        self._load_resources()
        self._create_widgets()
        self._setup_layout()
        self._bind_events()
        self._process_queue()

    def _load_resources(self):
        self.icon_pending = make_status_mark("pending")
        self.icon_success = make_status_mark("success")
        self.icon_failure = make_status_mark("failure")

    def _create_widgets(self):
        self.main_frame = ttk.Frame(self.root, padding="5")

        # Toolbar
        self.toolbar = ttk.Frame(self.main_frame)
        self.add_files_btn = ttk.Button(self.toolbar, text="Add Files", command=self.on_add_files_click)
        self.add_folder_btn = ttk.Button(self.toolbar, text="Add Folder", command=self.on_add_folder_click)
        self.remove_btn = ttk.Button(self.toolbar, text="Remove Selected", command=self.on_remove_click)
        self.remove_all_btn = ttk.Button(self.toolbar, text="Remove All", command=self.on_remove_all_click)

        self.right_toolbar = ttk.Frame(self.toolbar)
        self.logs_btn = ttk.Button(self.right_toolbar, text="Logs", command=self.on_logs_click)
        self.settings_btn = ttk.Button(self.right_toolbar, text="Style Settings", command=self.on_settings_click)

        # Treeview
        self.tree_frame = ttk.Frame(self.main_frame)
        self.tree = ttk.Treeview(self.tree_frame, columns=("size", "message"), selectmode="extended")
        self.tree_scroll_y = ttk.Scrollbar(self.tree_frame, orient=tk.VERTICAL, command=self.tree.yview)
        self.tree.configure(yscrollcommand=self.tree_scroll_y.set)

        self.tree.heading("#0", text="Status / Filename", anchor=tk.W)
        self.tree.column("#0", width=380, anchor=tk.W)
        self.tree.heading("size", text="Size", anchor=tk.W)
        self.tree.column("size", width=90, minwidth=70, stretch=False)
        self.tree.heading("message", text="Result", anchor=tk.W)
        self.tree.column("message", width=350)
        self.tree.tag_configure("success", foreground="green")
        self.tree.tag_configure("failure", foreground="red")

        if TkinterDnD:
            self.tree.drop_target_register(DND_FILES)
            self.tree.dnd_bind('<<Drop>>', self.on_drop)

        # Output folder
        self.output_frame = ttk.Frame(self.main_frame)
        self.output_var = tk.StringVar(value=str(self.session.output_dir or ""))
        self.output_label = ttk.Label(self.output_frame, text="Output folder:")
        self.output_entry = ttk.Entry(self.output_frame, textvariable=self.output_var, state="readonly")
        self.browse_btn = ttk.Button(self.output_frame, text="Browse...", command=self.on_browse_output_click)
        self.open_output_btn = ttk.Button(self.output_frame, text="Open", command=self.on_open_output_click)

        self.bottom_panel = ttk.Frame(self.main_frame)
        self.progress = ttk.Progressbar(self.bottom_panel, mode="determinate")
        self.convert_btn = ttk.Button(self.bottom_panel, text="Convert", command=self.on_convert_click)

        self.status_frame = ttk.Frame(self.main_frame, relief=tk.SUNKEN, padding="2")
        self.status_label = ttk.Label(self.status_frame, text="Ready", anchor=tk.W)

    def _setup_layout(self):
        self.main_frame.pack(fill=tk.BOTH, expand=True)

        self.toolbar.pack(fill=tk.X, pady=(0, 5))
        self.add_files_btn.pack(side=tk.LEFT, padx=2)
        self.add_folder_btn.pack(side=tk.LEFT, padx=2)
        self.remove_btn.pack(side=tk.LEFT, padx=2)
        self.remove_all_btn.pack(side=tk.LEFT, padx=2)

        self.right_toolbar.pack(side=tk.RIGHT)
        self.logs_btn.pack(side=tk.LEFT, padx=2)
        self.settings_btn.pack(side=tk.LEFT, padx=2)

        self.tree_frame.pack(fill=tk.BOTH, expand=True)
        self.tree_scroll_y.pack(side=tk.RIGHT, fill=tk.Y)
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.output_frame.pack(fill=tk.X, pady=(5, 0))
        self.output_label.pack(side=tk.LEFT)
        self.output_entry.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=5)
        self.open_output_btn.pack(side=tk.RIGHT, padx=2)
        self.browse_btn.pack(side=tk.RIGHT, padx=2)

        self.bottom_panel.pack(fill=tk.X, pady=5)
        self.convert_btn.pack(side=tk.RIGHT)
        self.progress.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=(0, 10))

        self.status_frame.pack(fill=tk.X, side=tk.BOTTOM)
        self.status_label.pack(fill=tk.X)

    def _bind_events(self):
        self.tree.bind("<Delete>", lambda e: self.on_remove_click())
        self.root.bind("<Control-a>", self.on_select_all)

    def _is_busy(self) -> bool:
        return bool(self.conversion_thread and self.conversion_thread.is_alive())

    def _update_ui_state(self, busy):
        state = tk.DISABLED if busy else tk.NORMAL
        for btn in (self.add_files_btn, self.add_folder_btn, self.remove_btn, self.remove_all_btn,
                    self.settings_btn, self.browse_btn, self.convert_btn):
            btn.config(state=state)

    # --- Actions ---

    def on_logs_click(self):
        """Opens the logs directory."""
        if LOG_DIR.exists():
            open_path(LOG_DIR)
        else:
            messagebox.showinfo("Logs", "Log directory does not exist yet.")

    def on_settings_click(self):
        dialog = StyleDialog(self.root, self.session.options)
        if dialog.result:
            self.session.set_options(dialog.result)
            self.status_label.config(text="Style settings saved.")

    def on_browse_output_click(self):
        folder = filedialog.askdirectory(title="Output Folder", initialdir=self.output_var.get() or None)
        self.session.set_output_dir(folder)
        self.output_var.set(str(self.session.output_dir or ""))

    def on_open_output_click(self):
        if self.session.output_dir and self.session.output_dir.is_dir():
            open_path(self.session.output_dir)

    def on_select_all(self, event=None):
        self.tree.selection_set(self.tree.get_children())

    # --- File list ---

    def on_add_files_click(self):
        files = filedialog.askopenfilenames(
            title="Select Word Documents",
            filetypes=[("Word Documents", "*.docx *.doc"), ("All Files", "*.*")]
        )
        if files:
            self._add_paths([Path(f) for f in files])

    def on_add_folder_click(self):
        folder = filedialog.askdirectory()
        if folder:
            self._add_paths(find_word_documents(Path(folder)))

    def on_drop(self, event):
        data = event.data
        if not data: return
        try:
            paths_list = self.root.tk.splitlist(data)
        except Exception:
            paths_list = re.findall(r'\{([^}]+)\}|([^{\s}]+)', data)
            paths_list = [p[0] or p[1] for p in paths_list]

        if paths_list:
            self._add_paths([Path(p) for p in paths_list])

    def _add_paths(self, paths: list[Path]):
        if self._is_busy(): return
        try:
            added = self.session.add_files(paths)
        except SelectionError as e:
            messagebox.showwarning("Add Files", str(e))
            return

        for entry in added:
            item_id = self.tree.insert("", tk.END, text=entry.name, image=self.icon_pending,
                                       values=(entry.size, ""))
            self.file_map[str(entry.path)] = item_id
        self.status_label.config(text=f"Added {len(added)} new files.")

    def on_remove_click(self):
        if self._is_busy(): return
        selected = self.tree.selection()
        if not selected: return

        for item_id in selected:
            s_path = next((k for k, v in self.file_map.items() if v == item_id), None)
            if s_path:
                self.session.remove_file(Path(s_path))
                del self.file_map[s_path]
            self.tree.delete(item_id)
        self.status_label.config(text="Items removed.")

    def on_remove_all_click(self):
        if self._is_busy(): return
        self.tree.delete(*self.tree.get_children())
        self.file_map.clear()
        self.session.clear_files()
        self.status_label.config(text="All items removed.")

    # --- Conversion ---

    def on_convert_click(self):
        if self._is_busy(): return
        try:
            self.session.check_ready()
        except PreconditionError as e:
            messagebox.showwarning("Cannot Convert", str(e))
            return

        self.batch_items = [self.file_map[str(entry.path)] for entry in self.session.files]
        for item_id in self.batch_items:
            self.tree.item(item_id, image=self.icon_pending, tags=())
            self.tree.set(item_id, "message", "Waiting...")

        self.progress.config(maximum=len(self.batch_items), value=0)
        self._update_ui_state(busy=True)
        self.status_label.config(text=f"Converting {len(self.batch_items)} files...")

        def run_batch():
            try:
                results = self.session.start_conversion(self._progress_callback)
                self.queue.put(("batch_done", None, results))
            except Exception as e:
                log.exception("Batch conversion crashed.")
                self.queue.put(("fatal_error", None, str(e)))

        self.conversion_thread = threading.Thread(target=run_batch, daemon=True)
        self.conversion_thread.start()

    def _progress_callback(self, index: int, total: int, result: ConversionResult):
        """Runs on the worker thread; hands the result over to the Tk thread."""
        self.queue.put(("progress", self.batch_items[index], (index, total, result)))

    def _show_result(self, item_id, result: ConversionResult):
        if result.success:
            self.tree.item(item_id, image=self.icon_success, tags=("success",))
            self.tree.set(item_id, "message", f"{result.message}: {result.output_path}")
        else:
            self.tree.item(item_id, image=self.icon_failure, tags=("failure",))
            self.tree.set(item_id, "message", result.message)

    def _process_queue(self):
        try:
            while True:
                task, item_id, data = self.queue.get_nowait()

                match task:
                    case "progress":
                        index, total, result = data
                        self.progress.config(value=index + 1)
                        self.status_label.config(text=f"[{index + 1}/{total}] {result.file_name}")
                        if self.tree.exists(item_id):
                            self._show_result(item_id, result)
                    case "batch_done":
                        self._update_ui_state(busy=False)
                        summary = BatchSummary.from_results(data)
                        self.status_label.config(text=summary.status_text)
                        if summary.failed:
                            messagebox.showwarning("Done", summary.status_text)
                        else:
                            messagebox.showinfo("Done", summary.status_text)
                    case "fatal_error":
                        self._update_ui_state(busy=False)
                        messagebox.showerror("Error", data)

        except queue.Empty:
            pass
        self.root.after(100, self._process_queue)


def run_gui():
    if TkinterDnD:
        root = TkinterDnD.Tk()
    else:
        root = tk.Tk()
    app = ConverterApp(root)
    root.mainloop()
