import argparse
import logging
import sys

from juju_names.config import Config, OUTPUT_FORMATS
from juju_names.exceptions import ConfigError
from juju_names.identity import is_unit, is_service, is_machine
from juju_names.tags import (
    machine_tag, service_tag, parse_tag, is_valid_tag, tag_kinds)
from juju_names.unit import (
    unit_tag_from_name, unit_service, is_valid_unit, UNIT_TAG_KIND)

log = logging.getLogger("juju-names")

PLUGIN_DESCRIPTION = "Juju entity name and tag conversion"


def setup_parser():
    if '--description' in sys.argv:
        print(PLUGIN_DESCRIPTION)
        sys.exit(0)

    parser = argparse.ArgumentParser(
        description="%s\n%s" % (PLUGIN_DESCRIPTION, invoke_action.__doc__),
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        "-f", "--format", choices=OUTPUT_FORMATS,
        help="Output format (default json)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose output")

    parser.add_argument("targets", nargs="+")

    return parser


def to_tag(name):
    if is_machine(name):
        return machine_tag(name)
    elif is_unit(name):
        return unit_tag_from_name(name)
    elif is_valid_tag(name):
        return parse_tag(name)
    elif is_service(name):
        return service_tag(name)
    raise ValueError("Unknown entity %s" % name)


def describe(name):
    tag = to_tag(name)
    d = {'kind': tag.kind, 'id': tag.id, 'tag': str(tag)}
    if tag.kind == UNIT_TAG_KIND:
        d['service'] = tag.service
    return d


def invoke_action(targets):
    """
    Describe a unit, service or machine by name or by tag::
      $ juju names mysql/0
      $ juju names unit-mysql-0

    Get the tag for a name::
      $ juju names tag mysql/0

    Get the name for a tag::
      $ juju names id unit-mysql-0

    Get the service a unit belongs to::
      $ juju names service mysql/0

    Check whether names are valid unit names::
      $ juju names valid mysql/0 mysql/01

    List the known tag kinds::
      $ juju names kinds

    The action words kinds, valid, tag, id and service win over entity
    names, so a service with one of those names is described by its tag::
      $ juju names service-tag

    A name with a tag kind prefix is read as a tag, so service-mysql is
    the service mysql. Describe a service named service-mysql by its tag::
      $ juju names service-service-mysql
    """
    action, args = targets[0], targets[1:]
    if action == "kinds":
        return tag_kinds()
    elif action == "valid":
        if not args:
            raise ValueError("No names given")
        return dict((n, is_valid_unit(n)) for n in args)
    elif action in ("tag", "id", "service"):
        if len(args) != 1:
            raise ValueError("%s takes a single name %s" % (action, args))
        name = args[0]
        if action == "tag":
            return str(to_tag(name))
        elif action == "id":
            return parse_tag(name).id
        return unit_service(name)

    if len(targets) > 1:
        return [describe(t) for t in targets]
    return describe(action)


def main(args=None):
    parser = setup_parser()
    options = parser.parse_args(args)
    config = Config(options)

    if config.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        datefmt="%Y/%m/%d %H:%M.%S",
        format="%(asctime)s:%(levelname)s %(message)s")

    try:
        log.debug("Invoking action")
        result = invoke_action(options.targets)
        if result is not None:
            print(config.dump(result))
        log.debug("Action complete")
    except ConfigError as e:
        print("Configuration error: %s" % e)
        sys.exit(1)
    except ValueError as e:
        print("Invalid parameters: %s" % e)
        sys.exit(1)


if __name__ == '__main__':
    main()
