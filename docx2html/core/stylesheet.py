"""
Compiles a StyleOptions record into the CSS embedded in every output document.
"""
from ..utils.config import StyleOptions


def _num(value) -> str:
    """
    Formats a number for CSS, without a trailing '.0' on whole values.
    Non-numeric values are inserted verbatim.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


def _half(value) -> str:
    try:
        return _num(float(value) / 2)
    except (TypeError, ValueError):
        return str(value)


def _rule(selector: str, declarations: list[str]) -> str:
    body = "\n".join(f"    {d}" for d in declarations)
    return f"{selector} {{\n{body}\n}}"


def compile_stylesheet(options: StyleOptions) -> str:
    """
    Returns the stylesheet text for the given options.

    Values are inserted verbatim; nothing is validated, so a malformed value
    only yields an ineffective declaration. Custom CSS is appended as-is.
    """
    o = options
    rules = [
        _rule("body", [
            f"font-family: {o.font_family};",
            f"font-size: {o.font_size}px;",
            f"line-height: {o.line_height};",
            f"margin: {o.page_margin}px;",
            f"color: {o.text_color};",
        ]),
    ]

    heading = [
        f"color: {o.heading_color};",
        f"margin-top: {_num(o.heading_margin)}px;",
        f"margin-bottom: {_half(o.heading_margin)}px;",
    ]
    if o.heading_bold:
        heading.append("font-weight: bold;")
    if o.heading_underline:
        heading.append("text-decoration: underline;")
    rules.append(_rule("h1, h2, h3, h4, h5, h6", heading))

    rules.append(_rule("p", ["margin-bottom: 15px;"]))

    rules.append(_rule("table", [
        "border-collapse: collapse;",
        "width: 100%;",
        "margin: 20px 0;",
    ]))
    rules.append(_rule("th, td", [
        f"border: 1px solid {o.table_border_color};",
        f"padding: {o.table_padding}px;",
        "text-align: left;",
    ]))
    rules.append(_rule("th", [f"background-color: {o.table_header_bg};"]))
    if o.table_striped:
        rules.append(_rule("tr:nth-child(even)", ["background-color: rgba(0,0,0,0.02);"]))

    image = [
        f"max-width: {o.image_max_width}%;",
        "height: auto;",
    ]
    if not o.image_responsive:
        image.append("width: auto;")
    if o.image_center:
        image.extend(["display: block;", "margin: 0 auto;"])
    rules.append(_rule("img", image))

    if o.add_page_breaks:
        rules.append(_rule(".page-break", ["page-break-before: always;"]))

    css = "\n\n".join(rules) + "\n"
    if o.custom_css:
        css += "\n" + o.custom_css + "\n"
    return css
