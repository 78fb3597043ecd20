"""
Demo Field Values

Loads the sample field values shipped in demo_data.yaml, one complete set per
document kind.
"""

from pathlib import Path
from typing import Dict, Union

from omegaconf import OmegaConf

from docbuilder.contexts.documents.document import DocumentKind

DEMO_DATA_PATH = Path(__file__).parent / "demo_data.yaml"


def load_demo_fields(
    kind: Union[str, DocumentKind], data_path: Path = DEMO_DATA_PATH
) -> Dict[str, str]:
    """
    Get demo field values for a document kind.

    Args:
        kind: Document kind or its tag
        data_path: YAML file with one mapping per kind

    Returns:
        Fresh dict of field values

    Raises:
        ValueError: If kind is not a known document kind
    """
    kind = DocumentKind(kind)
    demo = OmegaConf.to_container(OmegaConf.load(data_path), resolve=True)
    return {key: str(value) for key, value in demo[kind.value].items()}
