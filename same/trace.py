DEBUG_ENABLED = False
DEBUG_DEPTH = 0

# debug decorator
def debug(func):
    if not DEBUG_ENABLED:
        return func

    def wrapper(*args, **kwargs):
        global DEBUG_DEPTH
        saved_depth = DEBUG_DEPTH
        prefix = '  ' * DEBUG_DEPTH
        print(f"{prefix}{func.__qualname__}({', '.join(repr(x) for x in args)}, {kwargs}) {{")
        DEBUG_DEPTH += 1
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            print(f"{prefix}}}raise {e!r}")
            raise
        finally:
            DEBUG_DEPTH -= 1
            assert saved_depth == DEBUG_DEPTH
        print(f"{'  ' * (DEBUG_DEPTH + 1)}return {result!r}")
        print(f"{prefix}}}")
        return result

    wrapper.__name__ = func.__name__
    wrapper.__qualname__ = func.__qualname__
    wrapper.__doc__ = func.__doc__
    return wrapper
