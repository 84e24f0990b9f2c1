class NamesError(ValueError):
    """Base class for all juju-names errors."""


class InvalidNameError(NamesError):

    def __init__(self, name, kind):
        self.name = name
        self.kind = kind
        super(InvalidNameError, self).__init__(
            '"%s" is not a valid %s name' % (name, kind))


class InvalidTagError(NamesError):

    def __init__(self, tag, kind=None):
        self.tag = tag
        self.kind = kind
        if kind:
            msg = '"%s" is not a valid %s tag' % (tag, kind)
        else:
            msg = '"%s" is not a valid tag' % (tag,)
        super(InvalidTagError, self).__init__(msg)


class ConfigError(NamesError):
    """Invalid command line or environment configuration."""
