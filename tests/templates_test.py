# tests/templates_test.py
from fnm_setup import templates

EXPECTED_CMD_SCRIPT = (
    "@echo off\n"
    ":: for /F will launch a new instance of cmd so we create a guard to prevent an infinite loop\n"
    "if not defined FNM_AUTORUN_GUARD (\n"
    '    set "FNM_AUTORUN_GUARD=AutorunGuard"\n'
    "    FOR /f \"tokens=*\" %%z IN ('fnm env --use-on-cd --corepack-enabled --shell cmd') DO CALL %%z\n"
    ")\n"
)


def test_powershell_init_line():
    assert templates.powershell_init_line("fnm") == (
        "fnm env --use-on-cd --corepack-enabled --shell powershell | Out-String | Invoke-Expression"
    )


def test_profile_block_is_header_plus_init_line():
    block = templates.profile_block("fnm")
    assert block.splitlines() == ["# fnm (Fast Node Manager)", templates.powershell_init_line("fnm")]
    assert block.endswith("\n")


def test_cmd_init_script_matches_fixed_template():
    assert templates.cmd_init_script("fnm") == EXPECTED_CMD_SCRIPT


def test_cmd_init_script_uses_tool_name():
    script = templates.cmd_init_script(r"C:\tools\fnm.exe")
    assert r"('C:\tools\fnm.exe env --use-on-cd --corepack-enabled --shell cmd')" in script


def test_marker_is_found_in_generated_block():
    assert templates.marker("fnm") in templates.profile_block("fnm")
    assert templates.marker("fnm") == "fnm env"
