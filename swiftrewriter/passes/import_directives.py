"""Turn Objective-C preprocessor imports into Swift module imports."""

from __future__ import annotations

import logging
import re

from ..intentions import IntentionCollection
from .base import IntentionPass
from .context import IntentionPassContext

logger = logging.getLogger(__name__)

# `#import <UIKit/UIKit.h>`, `#include <Foundation/Foundation.h>`
FRAMEWORK_IMPORT_RE = re.compile(r"^\s*#\s*(?:import|include)\s*<\s*([A-Za-z_]\w*)/[^>]+>")
# `@import Foundation;`, `@import UIKit.UIView;`
MODULE_IMPORT_RE = re.compile(r"^\s*@import\s+([A-Za-z_]\w*)(?:\.[\w.]*)?\s*;")


def module_name(directive: str) -> str | None:
    """Swift module imported by a preprocessor directive, if any.

    Quoted (`#import "Foo.h"`) and bare-header (`#include <stdio.h>`)
    imports have no Swift counterpart and yield None.
    """
    match = FRAMEWORK_IMPORT_RE.match(directive)
    if match is None:
        match = MODULE_IMPORT_RE.match(directive)
    if match is None:
        return None
    return match.group(1)


class ImportDirectiveIntentionPass(IntentionPass):
    def apply(self, collection: IntentionCollection, context: IntentionPassContext) -> None:
        for file in collection.file_intentions():
            for directive in file.preprocessor_directives:
                name = module_name(directive)
                if name is None or name in file.import_directives:
                    continue
                file.import_directives.append(name)
                file.history.record_change(self.history_tag, "Imported module " + name)
                logger.debug("%s: import %s", file.source_path, name)
