"""Text bodies for generated manifests and default sources.

The manifests are emitted in the Cargo TOML dialect. Values are written as
TOML basic strings; dependency keys that are not bare TOML keys are quoted.

Example:
    >>> print(default_manifest("foo"), end="")
    [package]
    name = "foo"
    version = "1.0.0"
"""

from __future__ import annotations

import re
from pathlib import PurePath

DEFAULT_VERSION = "1.0.0"
FUZZ_VERSION = "0.0.0"
FUZZ_SUFFIX = "-fuzz"
FUZZ_EDITION = "2018"
FUZZ_SUPPORT_CRATE = "libfuzzer-sys"
FUZZ_SUPPORT_GIT = "https://github.com/rust-fuzz/libfuzzer-sys.git"

_BARE_KEY_RE = re.compile(r"^[A-Za-z0-9_-]+$")

DEFAULT_MANIFEST_TEMPLATE = """[package]
name = {name}
version = {version}
"""

FUZZ_MANIFEST_TEMPLATE = """[package]
name = {fuzz_name}
version = {version}
authors = ["Automatically generated"]
publish = false
edition = {edition}

[package.metadata]
cargo-fuzz = true

[workspace]
members = ["."]

[dependencies.{parent_key}]
path = ".."

[dependencies.{support_key}]
git = {support_git}
"""

BIN_TARGET_TEMPLATE = """
[[bin]]
name = {name}
path = {path}
"""

DEFAULT_LIB_SOURCE = """pub fn pass_fuzzing(data: &[u8]) {
    let _ = data;
}

pub fn fail_fuzzing(data: &[u8]) {
    if data.len() == 7 {
        panic!("I'm afraid of number 7");
    }
}
"""

DEFAULT_FUZZ_TARGET_TEMPLATE = """#![no_main]
use libfuzzer_sys::fuzz_target;

fuzz_target!(|data: &[u8]| {{
    {crate}::pass_fuzzing(data);
}});
"""


def toml_string(value: str) -> str:
    """Render ``value`` as a TOML basic string.

    Example:
        >>> toml_string('say "hi"')
        '"say \\\\"hi\\\\""'
    """
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def toml_key(value: str) -> str:
    """Render ``value`` as a TOML key, quoting it unless it is bare.

    Example:
        >>> toml_key("libfuzzer-sys"), toml_key("my crate")
        ('libfuzzer-sys', '"my crate"')
    """
    if _BARE_KEY_RE.match(value):
        return value
    return toml_string(value)


def crate_ident(name: str) -> str:
    """Return the identifier Rust code uses to refer to package ``name``.

    Example:
        >>> crate_ident("my-lib")
        'my_lib'
    """
    return name.replace("-", "_")


def default_manifest(name: str) -> str:
    """Return the minimal manifest for a parent project."""
    return DEFAULT_MANIFEST_TEMPLATE.format(
        name=toml_string(name), version=toml_string(DEFAULT_VERSION)
    )


def fuzz_manifest(parent_name: str) -> str:
    """Return the manifest for the fuzz sub-project of ``parent_name``."""
    return FUZZ_MANIFEST_TEMPLATE.format(
        fuzz_name=toml_string(f"{parent_name}{FUZZ_SUFFIX}"),
        version=toml_string(FUZZ_VERSION),
        edition=toml_string(FUZZ_EDITION),
        parent_key=toml_key(parent_name),
        support_key=toml_key(FUZZ_SUPPORT_CRATE),
        support_git=toml_string(FUZZ_SUPPORT_GIT),
    )


def bin_target_block(name: str, path: PurePath) -> str:
    """Return a ``[[bin]]`` section to append to the fuzz manifest.

    Example:
        >>> print(bin_target_block("t1", PurePath("fuzz_targets/t1.rs")), end="")
        <BLANKLINE>
        [[bin]]
        name = "t1"
        path = "fuzz_targets/t1.rs"
    """
    return BIN_TARGET_TEMPLATE.format(
        name=toml_string(name), path=toml_string(path.as_posix())
    )


def default_fuzz_target(parent_name: str) -> str:
    """Return a libFuzzer target that feeds its input to ``pass_fuzzing``."""
    return DEFAULT_FUZZ_TARGET_TEMPLATE.format(crate=crate_ident(parent_name))
