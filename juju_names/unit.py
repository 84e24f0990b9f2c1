"""
Unit names and tags.

A unit name is ``<service>/<number>``, eg. ``mysql/0``. Its tag replaces
the last "/" with "-" and prefixes the kind, eg. ``unit-mysql-0``. Service
names may contain hyphens, so conversions in both directions only touch
the last separator.
"""
import logging

from juju_names.exceptions import InvalidNameError
from juju_names.identity import UNIT_REGEX, is_unit
from juju_names.tags import Tag, ServiceTag, register_tag_kind, parse_tag_kind

log = logging.getLogger("juju-names")

UNIT_TAG_KIND = "unit"


@register_tag_kind
class UnitTag(Tag):
    __slots__ = ()

    kind = UNIT_TAG_KIND

    @classmethod
    def valid_suffix(cls, suffix):
        return "/" not in suffix and is_unit(_tag_suffix_to_id(suffix))

    @property
    def id(self):
        return _tag_suffix_to_id(self.name)

    @property
    def service(self):
        return self.name.rsplit('-', 1)[0]

    @property
    def number(self):
        return int(self.name.rsplit('-', 1)[1])

    @property
    def service_tag(self):
        return ServiceTag(self.service)


def tag_from_unit_name(unit_name):
    """Return the tag for the unit name, or None if it is not valid."""
    if not is_unit(unit_name):
        log.debug("Invalid unit name %s", unit_name)
        return None
    i = unit_name.rfind('/')
    if i <= 0:
        return None
    return UnitTag(unit_name[:i] + '-' + unit_name[i + 1:])


def unit_tag_from_name(unit_name):
    """Return the tag for the unit name.

    Raises InvalidNameError if the name is not a valid unit name.
    """
    tag = tag_from_unit_name(unit_name)
    if tag is None:
        raise InvalidNameError(unit_name, UNIT_TAG_KIND)
    return tag


def unit_tag(unit_name):
    """Return the tag for a unit name known to be valid.

    An invalid name is a programming error and raises AssertionError.
    Anything handling user input should call unit_tag_from_name instead.
    """
    tag = tag_from_unit_name(unit_name)
    if tag is None:
        raise AssertionError("Invalid unit name %s" % unit_name)
    return tag


def parse_unit_tag(tag_string):
    """Parse a unit tag string, eg. ``unit-mysql-0``.

    Raises InvalidTagError if the string is not a tag or is a tag of
    another kind.
    """
    return parse_tag_kind(tag_string, UNIT_TAG_KIND)


def is_valid_unit(name):
    return is_unit(name)


def unit_service(unit_name):
    """Get the name of the service the unit belongs to."""
    if not is_unit(unit_name):
        raise InvalidNameError(unit_name, UNIT_TAG_KIND)
    return UNIT_REGEX.match(unit_name).group(1)


def _tag_suffix_to_id(s):
    i = s.rfind('-')
    if i > 0:
        s = s[:i] + '/' + s[i + 1:]
    return s
