import re

SERVICE_SNIPPET = "(?:[a-z][a-z0-9]*(?:-[a-z0-9]*[a-z][a-z0-9]*)*)"
NUMBER_SNIPPET = "(?:0|[1-9][0-9]*)"
CONTAINER_TYPE_SNIPPET = "[a-z]+"
MACHINE_SNIPPET = "%s(?:/%s/%s)*" % (
    NUMBER_SNIPPET, CONTAINER_TYPE_SNIPPET, NUMBER_SNIPPET)

SERVICE_REGEX = re.compile("^%s$" % SERVICE_SNIPPET)
MACHINE_REGEX = re.compile("^%s$" % MACHINE_SNIPPET)
UNIT_REGEX = re.compile("^(%s)/%s$" % (SERVICE_SNIPPET, NUMBER_SNIPPET))


def _matches(regex, s):
    if not isinstance(s, str):
        return False
    # fullmatch, "$" alone would accept a trailing newline.
    return regex.fullmatch(s) is not None


def is_machine(s):
    return _matches(MACHINE_REGEX, s)


def is_unit(s):
    return _matches(UNIT_REGEX, s)


def is_service(s):
    return _matches(SERVICE_REGEX, s)
