"""
Tag kinds and the registry used to parse tag strings of unknown kind.

A tag is the canonical, kind prefixed form of an entity name, eg. the
unit ``mysql/0`` has the tag ``unit-mysql-0``.
"""
import logging

from juju_names.exceptions import InvalidTagError
from juju_names.identity import is_machine, is_service

log = logging.getLogger("juju-names")

tag_registry = {}


def register_tag_kind(cls):
    """Register a tag class so parse_tag can dispatch on its kind."""
    if cls.kind in tag_registry:
        raise ValueError("Tag kind %s already registered" % cls.kind)
    tag_registry[cls.kind] = cls
    return cls


def tag_kinds():
    return sorted(tag_registry)


def parse_tag(tag_string):
    """Parse a tag string of any registered kind."""
    if not isinstance(tag_string, str) or '-' not in tag_string:
        raise InvalidTagError(tag_string)
    kind, suffix = tag_string.split('-', 1)
    cls = tag_registry.get(kind)
    if cls is None or not suffix:
        log.debug("Unknown tag kind in %s", tag_string)
        raise InvalidTagError(tag_string)
    tag = cls.from_tag_suffix(suffix)
    if tag is None:
        log.debug("Invalid %s tag suffix in %s", kind, tag_string)
        raise InvalidTagError(tag_string, kind)
    return tag


def parse_tag_kind(tag_string, kind):
    """Parse a tag string, requiring it to be of the given kind."""
    try:
        tag = parse_tag(tag_string)
    except InvalidTagError:
        raise InvalidTagError(tag_string, kind)
    if tag.kind != kind:
        raise InvalidTagError(tag_string, kind)
    return tag


def is_valid_tag(tag_string):
    try:
        parse_tag(tag_string)
    except InvalidTagError:
        return False
    return True


class Tag(object):
    """Immutable base for all tag kinds.

    ``name`` holds the part of the tag string after the kind prefix,
    subclasses map it to and from the entity id. Constructing a tag with
    a name its kind rejects raises InvalidTagError.
    """
    __slots__ = ('name',)

    kind = None

    def __init__(self, name):
        if not isinstance(name, str) or not self.valid_suffix(name):
            raise InvalidTagError("%s-%s" % (self.kind, name), self.kind)
        object.__setattr__(self, 'name', name)

    def __setattr__(self, key, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __delattr__(self, key):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __reduce__(self):
        return (self.__class__, (self.name,))

    @classmethod
    def valid_suffix(cls, suffix):
        raise NotImplementedError()

    @classmethod
    def from_tag_suffix(cls, suffix):
        if not cls.valid_suffix(suffix):
            return None
        return cls(suffix)

    @property
    def id(self):
        return self.name

    def __str__(self):
        return "%s-%s" % (self.kind, self.name)

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self)

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return (self.kind, self.name) == (other.kind, other.name)

    def __hash__(self):
        return hash((self.kind, self.name))


@register_tag_kind
class ServiceTag(Tag):
    __slots__ = ()

    kind = "service"

    @classmethod
    def valid_suffix(cls, suffix):
        return is_service(suffix)


def service_tag(service_name):
    if not is_service(service_name):
        raise AssertionError("Invalid service name %s" % service_name)
    return ServiceTag(service_name)


@register_tag_kind
class MachineTag(Tag):
    __slots__ = ()

    kind = "machine"

    @classmethod
    def valid_suffix(cls, suffix):
        return "/" not in suffix and is_machine(suffix.replace('-', '/'))

    @property
    def id(self):
        # Container machine ids nest with "/", ie. 0/lxc/1 -> 0-lxc-1
        return self.name.replace('-', '/')


def machine_tag(machine_id):
    if not is_machine(machine_id):
        raise AssertionError("Invalid machine id %s" % machine_id)
    return MachineTag(machine_id.replace('/', '-'))
