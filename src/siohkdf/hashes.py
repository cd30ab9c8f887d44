import enum


class HashFunction(enum.Enum):
    """ Hash functions that can be selected by name to build an engine """

    SHA1 = 'sha1'
    SHA256 = 'sha256'
    SHA384 = 'sha384'
    SHA512 = 'sha512'

    def __repr__(self):
        return f'<{type(self).__name__}.{self.name}: {self.value!r}>'
