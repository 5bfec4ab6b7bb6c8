"""JSON Exporter - the persisted catalog format shared by builder and browser"""

import json
from pathlib import Path
from typing import Any, Dict

from ..models import Catalog, SkillRecord


def serialize_skill(skill: SkillRecord) -> Dict[str, Any]:
    """Serialize a skill using the catalog's camelCase keys"""
    return {
        "id": skill.id,
        "name": skill.name,
        "slug": skill.slug,
        "description": skill.description,
        "category": skill.category,
        "platform": skill.platform,
        "platformIcon": skill.platform_icon,
        "source": skill.source,
        "sourceUrl": skill.source_url,
        "skillMdUrl": skill.skill_md_url,
        "body": skill.body,
    }


class CatalogJSONExporter:
    """Export a Catalog as the JSON document read by the browser"""

    def __init__(self, pretty: bool = True):
        self.pretty = pretty

    def to_dict(self, catalog: Catalog) -> Dict[str, Any]:
        return {
            "generatedAt": catalog.generated_at,
            "totalSkills": len(catalog.skills),
            "sources": [{"name": s.name, "url": s.url} for s in catalog.sources],
            "skills": [serialize_skill(s) for s in catalog.skills],
        }

    def export_catalog(self, catalog: Catalog) -> str:
        """Export the catalog to a JSON string"""
        data = self.to_dict(catalog)
        if self.pretty:
            return json.dumps(data, indent=2, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)

    def export_to_file(self, catalog: Catalog, output_path: Path) -> None:
        """Write the catalog, replacing any previous file"""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.export_catalog(catalog))
