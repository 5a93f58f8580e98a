"""Behavior switches for form validation and control listing.

Centralized so tests can toggle behavior deterministically. Flags are simple
module-level booleans read at call time; tests patch them with
``unittest.mock.patch.object(flags, ...)``.
"""

# When an "invalid" event is cancelled by a listener the control is considered
# handled and left out of ValidationResult.unhandled_invalid_controls. Set to True
# to list every invalid control regardless of what its listeners did.
KEEP_CANCELED_INVALID_CONTROLS = False

# Interactive validation focuses the first unhandled invalid control and returns
# the invalid result. Set to False to stop after the static check and return None.
INTERACTIVE_VALIDATION_REPORTS = True

# <input type="image"> is not a listed element and never appears in form.elements.
EXCLUDE_IMAGE_BUTTONS = True
