"""
Trigger projection for the scale controller.

The scale controller only needs a function's trigger binding, tagged with
the function name.
"""

import copy
import logging
from typing import Any, Dict, Iterable, List, Optional

from ..core.case_insensitive import get_ignore_case
from ..models import Binding, FunctionDefinition, HostPaths
from .config_resolver import ConfigResolver

logger = logging.getLogger("metadata.trigger_extractor")


class TriggerExtractor:
    def __init__(self, config_resolver: Optional[ConfigResolver] = None):
        self.config_resolver = config_resolver or ConfigResolver()

    def extract(
        self, definition: FunctionDefinition, host_paths: HostPaths
    ) -> Optional[Dict[str, Any]]:
        """
        Find the trigger binding and add functionName to it.

        Returns:
            Copy of the first binding whose type ends with "Trigger", or None
            when the function has no bindings array or no trigger.
        """
        config = self.config_resolver.resolve(definition, host_paths)

        bindings = get_ignore_case(config, "bindings")
        if not isinstance(bindings, list):
            return None

        for binding in bindings:
            if not isinstance(binding, dict):
                continue
            if Binding.from_raw(binding).is_trigger:
                trigger = copy.deepcopy(binding)
                trigger["functionName"] = definition.name
                return trigger

        logger.debug(f"No trigger binding found for function {definition.name}")
        return None

    def extract_all(
        self, definitions: Iterable[FunctionDefinition], host_paths: HostPaths
    ) -> List[Dict[str, Any]]:
        triggers = []
        for definition in definitions:
            trigger = self.extract(definition, host_paths)
            if trigger is not None:
                triggers.append(trigger)
        return triggers
