"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "composition.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Composition configuration template for federation-composer.
# Replace every <REQUIRED> placeholder before running compose or validate.
# Replace <OPTIONAL> placeholders only when your setup needs them.

services:
  # Services are composed in the listed order; later services win ownership ties.
  - name: "<REQUIRED>"
    # Provide either inline SDL text or an SDL file path relative to this file.
    path: "<REQUIRED>"
    # inline: "<OPTIONAL>"
  - name: "<REQUIRED>"
    inline: |
      <REQUIRED>

output:
  schema_path: "<OPTIONAL>"
  metadata_path: "<OPTIONAL>"
  # Exit with a failure status when composition reports structural errors.
  fail_on_errors: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML composition configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
