"""Positional ``%s`` placeholder substitution."""

from textparts.domain.checks import require_non_null

PLACEHOLDER = "%s"


def format_template(template: str, *args: object) -> str:
    """Replace ``%s`` placeholders in ``template`` with ``args``, in order.

    ``%%s`` is an escaped placeholder: it is kept verbatim and consumes no
    argument. Placeholders left without an argument stay in the output and
    extra arguments are ignored.

    Example:
        >>> format_template("%s of %s", 3, 10)
        '3 of 10'
        >>> format_template("100%%s %s", "done")
        '100%%s done'
    """
    require_non_null(template, "Template must not be None")
    out: list[str] = []
    last = 0
    search_from = 0
    i = 0
    while i < len(args):
        pos = template.find(PLACEHOLDER, search_from)
        if pos == -1:
            break
        if pos > 0 and template[pos - 1] == "%":
            search_from = pos + len(PLACEHOLDER)
            continue
        out.append(template[last:pos])
        out.append(str(args[i]))
        i += 1
        last = pos + len(PLACEHOLDER)
        search_from = last
    out.append(template[last:])
    return "".join(out)
