from juju_names.exceptions import (
    NamesError, InvalidNameError, InvalidTagError, ConfigError)
from juju_names.identity import is_machine, is_service, is_unit
from juju_names.tags import (
    Tag, MachineTag, ServiceTag, machine_tag, service_tag,
    parse_tag, parse_tag_kind, is_valid_tag, register_tag_kind, tag_kinds)
from juju_names.unit import (
    UNIT_TAG_KIND, UnitTag, tag_from_unit_name, unit_tag_from_name, unit_tag,
    parse_unit_tag, is_valid_unit, unit_service)

__all__ = [
    'NamesError', 'InvalidNameError', 'InvalidTagError', 'ConfigError',
    'is_machine', 'is_service', 'is_unit',
    'Tag', 'MachineTag', 'ServiceTag', 'machine_tag', 'service_tag',
    'parse_tag', 'parse_tag_kind', 'is_valid_tag', 'register_tag_kind',
    'tag_kinds',
    'UNIT_TAG_KIND', 'UnitTag', 'tag_from_unit_name', 'unit_tag_from_name',
    'unit_tag', 'parse_unit_tag', 'is_valid_unit', 'unit_service']
