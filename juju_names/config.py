import json
import logging
import os

import yaml

from juju_names.exceptions import ConfigError

log = logging.getLogger("juju-names")

OUTPUT_FORMATS = ("json", "yaml")
TRUE_VALUES = ("1", "true", "yes")


class Config(object):

    def __init__(self, options):
        self.options = options

    @property
    def verbose(self):
        if getattr(self.options, 'verbose', False):
            return True
        return os.environ.get(
            "JUJU_NAMES_VERBOSE", "").lower() in TRUE_VALUES

    @property
    def output_format(self):
        """Get the output format.

        Command line option first, then the environment, then json.
        """
        fmt = getattr(self.options, 'format', None)
        if not fmt:
            fmt = os.environ.get("JUJU_NAMES_FORMAT") or "json"
        fmt = fmt.lower()
        if fmt not in OUTPUT_FORMATS:
            raise ConfigError("Unknown output format %s" % fmt)
        return fmt

    def dump(self, result):
        fmt = self.output_format
        log.debug("Formatting result as %s", fmt)
        if fmt == "yaml":
            return yaml.safe_dump(result, default_flow_style=False).rstrip()
        return json.dumps(result, indent=2)
