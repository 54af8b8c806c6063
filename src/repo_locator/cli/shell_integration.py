from __future__ import annotations
"""Shell functions that perform the actual location change.

A child process cannot change its parent's working directory, so the CLI
prints paths and these functions `cd` to them. They are also the layer that
keeps the user's last exit status intact around prompt-time checks.
"""

import shlex


SUPPORTED_SHELLS = ("bash", "zsh")


def build_shell_init(shell: str, *, executable: str = "repo-locator", function_name: str = "rcd") -> str:
    """Return the init script for `shell`, meant to be `eval`-ed from a profile.

    Defines:
    - `<function_name> [token]`: resolve the token and change into it
    - `up [levels]`: change into an ancestor directory
    - `__repo_locator_in_repo`: set `REPO_LOCATOR_IN_REPO` to 1/0 and return
      the exit status it was called with
    """
    if shell not in SUPPORTED_SHELLS:
        valid = ", ".join(SUPPORTED_SHELLS)
        raise ValueError(f"Unsupported shell '{shell}'. Allowed values: {valid}")

    command = f"command {shlex.quote(executable)}"
    lines = [
        f"# repo-locator integration for {shell}",
        f"{function_name}() {{",
        "    local target",
        f'    target="$({command} resolve -- "$@")" || return',
        '    builtin cd -- "$target"',
        "}",
        "",
        "up() {",
        "    local target",
        f'    target="$({command} up "${{1:-1}}")" || return',
        '    builtin cd -- "$target"',
        "}",
        "",
        "__repo_locator_in_repo() {",
        "    local last_status=$?",
        f"    if {command} classify --mode ancestor --quiet; then",
        "        REPO_LOCATOR_IN_REPO=1",
        "    else",
        "        REPO_LOCATOR_IN_REPO=0",
        "    fi",
        "    return $last_status",
        "}",
        "",
    ]

    if shell == "bash":
        lines.extend(_bash_completion(command, function_name))
    else:
        lines.extend(_zsh_completion(command, function_name))

    return "\n".join(lines) + "\n"


def _bash_completion(command: str, function_name: str) -> list[str]:
    return [
        f"_{function_name}_complete() {{",
        "    local last_status=$?",
        '    local cur="${COMP_WORDS[COMP_CWORD]}"',
        "    local IFS=$'\\n'",
        f'    COMPREPLY=($({command} complete -- "$cur" | cut -f1))',
        "    return $last_status",
        "}",
        f"complete -o nospace -F _{function_name}_complete {function_name}",
    ]


def _zsh_completion(command: str, function_name: str) -> list[str]:
    return [
        f"_{function_name}_complete() {{",
        "    local last_status=$?",
        "    local -a values labels",
        "    local line rest",
        f'    for line in "${{(@f)$({command} complete -- "$PREFIX")}}"; do',
        '        [[ -z "$line" ]] && continue',
        "        values+=(\"${line%%$'\\t'*}\")",
        "        rest=\"${line#*$'\\t'}\"",
        "        labels+=(\"${rest%%$'\\t'*}  (${rest#*$'\\t'})\")",
        "    done",
        '    compadd -U -Q -l -d labels -- "${values[@]}"',
        "    return $last_status",
        "}",
        f"compdef _{function_name}_complete {function_name}",
    ]
