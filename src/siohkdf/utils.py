import abc


class RegistryMeta(abc.ABCMeta):
    def __getitem__(cls, entry):
        return cls._registry[entry]

    def __contains__(cls, entry):
        return entry in cls._registry


def as_bytes(value, name):
    """
    Normalize an optional bytes-like argument into :class:`bytes`.

    >>> as_bytes(None, 'info')
    b''
    >>> as_bytes(bytearray(b'abc'), 'info')
    b'abc'
    >>> as_bytes('abc', 'info')
    Traceback (most recent call last):
      ...
    TypeError: info must be bytes-like, not str
    """
    if value is None:
        return b''
    try:
        return memoryview(value).tobytes()
    except TypeError as exc:
        e = f"{name} must be bytes-like, not {type(value).__name__}"
        raise TypeError(e) from exc
