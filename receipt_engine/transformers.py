import json
import os
from typing import Any, Dict, Optional

from receipt_engine.models import ExtractionResult

# output key -> ExtractionResult attribute
DEFAULT_MAPPING = {
    "allExtractedText": "all_text",
    "recordId": "record_id",
    "locatieVanHerkomst": "supplier_name",
    "weight": "weight",
}


def load_mapping(mapping_path: str) -> Dict[str, str]:
    with open(mapping_path, "r", encoding="utf-8") as f:
        return json.load(f)


def transform(result: ExtractionResult, mapping_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Map an ExtractionResult onto the output record, using mapping.json
    when one is given and the default field names otherwise
    """
    if mapping_path:
        if not os.path.exists(mapping_path):
            return {"error": f"Mapping config not found: {mapping_path}"}
        mapping = load_mapping(mapping_path)
    else:
        mapping = DEFAULT_MAPPING

    transformed = {}
    for final_field, raw_field in mapping.items():
        value = getattr(result, raw_field, None)
        transformed[final_field] = list(value) if isinstance(value, tuple) else value

    return transformed
