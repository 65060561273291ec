# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "marimo",
#     "multilities",
# ]
# ///

import marimo

__generated_with = "0.19.4"
app = marimo.App(width="medium", app_title="multilities playground")

with app.setup:
    import marimo as mo

    from multilities import (
        cap_text,
        derive_abbr,
        get_contrast,
        hex_to_rgba,
        prettify_array,
        prettify_number,
        round_to_next_best,
        split_equally,
        to_camel_case,
        to_kebab_case,
        to_pascal_case,
        to_snake_case,
        to_title_case,
    )


@app.cell
def title():
    mo.md("""
    # multilities playground

    Try the text, number and color helpers interactively.
    """)
    return


@app.cell
def input_text():
    text_input = mo.ui.text(
        label="Text",
        value="this-is-a-long-text",
        full_width=True,
    )
    max_length = mo.ui.slider(start=4, stop=40, value=10, label="Cap length")
    clean_cut = mo.ui.switch(value=True, label="Cut on word boundary")
    mo.vstack([text_input, mo.hstack([max_length, clean_cut])])
    return clean_cut, max_length, text_input


@app.cell
def text_table(clean_cut, max_length, text_input):
    _text = text_input.value
    _rows = [
        ("camelCase", to_camel_case(_text)),
        ("PascalCase", to_pascal_case(_text)),
        ("kebab-case", to_kebab_case(to_camel_case(_text))),
        ("snake_case", to_snake_case(to_camel_case(_text))),
        ("Title Case", to_title_case(_text.replace("-", " ").replace("_", " "))),
        ("Capped", cap_text(_text, max_length.value, clean_cut.value)),
        ("Abbreviation", derive_abbr(to_title_case(_text.replace("-", " ")), 3, "-")),
        ("Thirds", prettify_array(split_equally(_text, 3), " | ")),
    ]
    mo.ui.table(
        [{"Conversion": name, "Result": value} for name, value in _rows],
        selection=None,
    )
    return


@app.cell
def input_number():
    number_input = mo.ui.number(value=1234567.891, label="Number")
    digits = mo.ui.slider(start=0, stop=4, value=2, label="Fraction digits")
    mo.hstack([number_input, digits])
    return digits, number_input


@app.cell
def number_md(digits, number_input):
    _value = number_input.value
    mo.md(f"""
    | Format | Result |
    |---|---|
    | Grouped | `{prettify_number(_value, -digits.value)}` |
    | European | `{prettify_number(_value, -digits.value, 0, ".", ",")}` |
    | Next best (down) | `{round_to_next_best(_value) if _value else 0}` |
    | Next best (up) | `{round_to_next_best(_value, round_down=False) if _value else 0}` |
    """)
    return


@app.cell
def input_color():
    color_input = mo.ui.text(label="Hex color", value="#3377c4")
    color_input
    return (color_input,)


@app.cell
def color_html(color_input):
    _rgba = hex_to_rgba(color_input.value)
    _contrast = get_contrast(color_input.value)
    if _rgba is None:
        _html = f"<p style='color:orange;'>⚠️ <code>{color_input.value}</code> is not a hex color.</p>"
    else:
        _background = color_input.value if color_input.value.startswith("#") else f"#{color_input.value}"
        _html = (
            f"<div style='background:{_background}; color:{_contrast or '#000000'}; "
            "padding:16px; border-radius:8px; max-width:400px;'>"
            f"r={_rgba['r']} g={_rgba['g']} b={_rgba['b']} a={_rgba['a']}"
            "</div>"
        )
    mo.Html(_html)
    return


if __name__ == "__main__":
    app.run()
