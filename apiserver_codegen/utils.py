"""
Naming helpers shared by the pipeline and the bundled templates.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

# Acronyms the type generator folds before splitting on capitals
_GENERATOR_ACRONYMS = (("API", "Api"), ("AWS", "Aws"))

_UPPERCASE = re.compile(r"([A-Z])")
_NON_WORD = re.compile(r"\W")


def model_file_stem(kind: str) -> str:
    """Return the file stem openapi-generator uses for the model of ``kind``.

    The generator names files ``model_<snake_case>``; only the first
    occurrence of each acronym is folded, and every remaining capital
    starts a new word.

    Examples:
        "APIServiceSpec" -> "model_api_service_spec"
        "AWSDataPlaneSpec" -> "model_aws_data_plane_spec"
        "MeshSpec" -> "model_mesh_spec"
        "K8SClusterSpec" -> "model_k8_s_cluster_spec"

    Args:
        kind: The kind part of a qualified schema name

    Returns:
        The file name without extension
    """
    for acronym, replacement in _GENERATOR_ACRONYMS:
        kind = kind.replace(acronym, replacement, 1)
    spaced = _UPPERCASE.sub(r" \1", kind).strip()
    return "model_" + _NON_WORD.sub("_", spaced).lower()


def model_file_name(kind: str, extension: str = "go") -> str:
    """File name, with extension, of the generated model for ``kind``."""
    return f"{model_file_stem(kind)}.{extension}"


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case or camelCase field names to PascalCase.

    Examples:
        "spec" -> "Spec"
        "lastRunStatus" -> "LastRunStatus"
        "first_name" -> "FirstName"
    """
    if not text:
        return ""
    normalized = text.replace("_", " ").replace("-", " ")
    return "".join(word[:1].upper() + word[1:] for word in _WORD_PATTERN.findall(normalized) if word)
