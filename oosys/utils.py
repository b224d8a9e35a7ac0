"""Generic utilities.
"""
import types


def prepr(obj):
    """Short, deterministic representation of a value for reports.

    Dictionaries are shown with sorted keys and functions without their
    address.

        >>> prepr(1)
        '1'
        >>> prepr("hello")
        "'hello'"
        >>> prepr({'y': 2, 'x': [1, (2, 3)]})
        "{'x': [1, (2, 3)], 'y': 2}"
        >>> prepr((1,))
        '(1,)'
        >>> prepr(prepr)
        '<function prepr>'
        >>> prepr(len)
        '<function len>'
    """
    if isinstance(obj, list):
        return "[" + ", ".join(prepr(x) for x in obj) + "]"
    elif isinstance(obj, tuple):
        if len(obj) == 1:
            return "(" + prepr(obj[0]) + ",)"
        return "(" + ", ".join(prepr(x) for x in obj) + ")"
    elif isinstance(obj, dict):
        items = [prepr(k) + ": " + prepr(obj[k]) for k in sorted(obj, key=str)]
        return "{" + ", ".join(items) + "}"
    elif isinstance(obj, (types.FunctionType, types.BuiltinFunctionType)):
        return "<function %s>" % obj.__name__
    else:
        return repr(obj)


if __name__ == "__main__":
    import doctest

    doctest.testmod()
