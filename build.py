"""
Nuitka build script.
Compiles 2 separate executables for GUI and CLI.
"""
import subprocess
import sys


build_options = [
    "--product-name=Docx2Html",
    "--file-description=Word to HTML converter",
    "--file-version=1.0.0",
    "--product-version=1.0.0",
    "--onefile",    # Single .exe
    "--standalone",
    "--output-dir=./dist/",
    "--lto=yes",
    "--assume-yes-for-downloads",
    "--include-package=docx2html.resources",
    "--include-data-dir=docx2html/resources=docx2html/resources",
    "--static-libpython=auto",
    "--follow-imports",
]

# The CLI never touches Tk or Pillow
CLI_EXCLUDES = ["tkinter", "tkinterdnd2", "PIL"]


def compile_cli():
    print("--- Building CLI Version ---")
    options = build_options + [f"--nofollow-import-to={m}" for m in CLI_EXCLUDES] + [
        "--output-filename=docx2html_cli.exe",
        "--windows-console-mode=force",     # Force console for CLI
        "run_app.py"
    ]
    subprocess.check_call([sys.executable, "-m", "nuitka"] + options)

def compile_gui():
    print("--- Building GUI Version ---")
    options = build_options + [
        "--output-filename=docx2html.exe",
        "--windows-console-mode=disable",   # Hide console for GUI
        "--enable-plugin=tk-inter",
        "run_app.py"
    ]
    subprocess.check_call([sys.executable, "-m", "nuitka"] + options)

if __name__ == "__main__":
    compile_gui()
    compile_cli()
