import io

def escape(s, max_length=80):
    """
        quotes s the way repr does, cut down to max_length characters
        used to print input snippets in traces
    """
    quoted = repr(s)
    if len(quoted) > max_length:
        quoted = quoted[:max_length - 4] + "..." + quoted[-1]
    return quoted

def join(iterable, delim, width=80):
    """
        joins items with delim, breaking the line before an item that would cross width
    """
    buf = io.StringIO()
    iterable = iter(iterable)
    try:
        item = next(iterable)
    except StopIteration:
        return ""
    buf.write(item)
    line_len = len(item)
    for item in iterable:
        if line_len + len(delim) + len(item) > width:
            buf.write(delim.rstrip() + "\n")
            line_len = 0
        else:
            buf.write(delim)
            line_len += len(delim)
        buf.write(item)
        line_len += len(item)
    return buf.getvalue()
