import re

NON_ALNUM = re.compile(r"[^a-z0-9]")
UNDERSCORE_RUN = re.compile(r"_+")


def normalize_name(text):
    """
    Turn arbitrary header text into a snake_case identifier:
    - lowercase
    - anything outside [a-z0-9] becomes "_"
    - runs of "_" collapse to one, leading/trailing "_" dropped
    """
    name = NON_ALNUM.sub("_", text.lower())
    name = UNDERSCORE_RUN.sub("_", name)
    return name.strip("_")
