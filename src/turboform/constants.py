"""HTML form constants.

Element categories and keyword sets used by form elements, as defined by the
WHATWG HTML standard.

References:
    - https://html.spec.whatwg.org/multipage/forms.html#category-listed
    - https://html.spec.whatwg.org/multipage/forms.html#category-submit
    - https://html.spec.whatwg.org/multipage/form-control-infrastructure.html#attr-fs-method
"""

LISTED_ELEMENTS = frozenset(
    [
        "button",
        "fieldset",
        "input",
        "keygen",
        "object",
        "output",
        "select",
        "textarea",
    ]
)

SUBMITTABLE_ELEMENTS = frozenset(
    [
        "button",
        "input",
        "keygen",
        "object",
        "select",
        "textarea",
    ]
)

FORM_METHODS = ["get", "post", "dialog"]
DEFAULT_FORM_METHOD = "get"

FORM_ENCTYPES = [
    "application/x-www-form-urlencoded",
    "multipart/form-data",
    "text/plain",
]
DEFAULT_FORM_ENCTYPE = "application/x-www-form-urlencoded"

INPUT_TYPES = frozenset(
    [
        "button",
        "checkbox",
        "color",
        "date",
        "datetime-local",
        "email",
        "file",
        "hidden",
        "image",
        "month",
        "number",
        "password",
        "radio",
        "range",
        "reset",
        "search",
        "submit",
        "tel",
        "text",
        "time",
        "url",
        "week",
    ]
)

# Input types never subject to constraint validation
BARRED_INPUT_TYPES = frozenset(["button", "hidden", "image", "reset", "submit"])

CHECKABLE_INPUT_TYPES = frozenset(["checkbox", "radio"])

BUTTON_TYPES = frozenset(["button", "reset", "submit"])
