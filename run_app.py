# nuitka-project: --product-name=Docx2Html
# nuitka-project: --file-description="Word to HTML converter"
# nuitka-project: --file-version=1.0.0
# nuitka-project: --product-version=1.0.0

# nuitka-project: --standalone
# nuitka-project: --output-filename=docx2html.exe
# nuitka-project: --output-dir=./dist/

# nuitka-project: --windows-console-mode=attach
# (disable/force/attach/hide)

# nuitka-project: --lto=yes
# nuitka-project: --assume-yes-for-downloads

# nuitka-project: --enable-plugin=tk-inter

# include packaged presets
# nuitka-project: --include-package-data=docx2html.resources
# nuitka-project: --include-data-dir=docx2html/resources=docx2html/resources

# nuitka-project: --static-libpython=auto
# nuitka-project: --follow-imports

"""
Entry point for .exe compilers.
"""

from docx2html.main import main

if __name__ == "__main__":
    main()
