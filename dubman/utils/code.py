import traceback

def error_line(exc):
    """
        the last line python would print for an uncaught exc, module-qualified name and message
    """
    return traceback.format_exception_only(type(exc), exc)[-1].rstrip("\n")
