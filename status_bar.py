from column_labels import range_reference


def render_status(context, width):
    """
    context keys: mode, selection
    """
    mode = context["mode"].value.upper()
    text = f" {mode} | {range_reference(context['selection'])}"
    return text.ljust(width)[:width]
