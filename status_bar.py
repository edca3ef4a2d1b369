KEY_HINT = "h/l move  j/k base  q quit"


def render_status(context, width):
    """
    context keys: mode_label, value, hint
    """
    mode = (context.get('mode_label') or '').upper()
    value = context.get('value', 0)
    hint = context.get('hint', KEY_HINT)
    text = f" {mode} | {value} | {hint}"

    return text.ljust(width)[:width]
