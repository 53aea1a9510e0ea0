# Core type aliases for sexpa's data model.
# Container nodes live in a flat Arena keyed by NodeId; a parent refers to a
# nested container through a Reference atom holding the child's NodeId rather
# than owning it.
#
# Naming guidance:
# - NodeId:  position of a container in the Arena, assigned when it opens.
# - EmitFn:  sink for rendered trace lines (print by default).

from typing import Callable

from loguru import logger

NodeId = int

EmitFn = Callable[[str], None]

# Library use stays quiet; the CLI turns this back on via configure_logging.
logger.disable("sexpa")
