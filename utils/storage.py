import csv
import json
import os
from typing import List, Tuple

from models import Property

CSV_HEADERS = [
    "id",
    "title",
    "location",
    "price",
    "size",
    "rooms",
    "type",
    "source",
    "sourceUrl",
    "listedDays",
    "image",
    "images",
    "buildYear",
    "interior",
    "energyLabel",
    "features",
    "deposit",
    "neighborhood",
    "fullDescription",
    "scrapedAt",
]


class Storage:
    def __init__(self, output_dir: str, screenshot_dir: str, screenshot_url_prefix: str = "/screenshots"):
        self.output_dir = output_dir
        self.screenshot_dir = screenshot_dir
        self.screenshot_url_prefix = "/" + screenshot_url_prefix.strip("/")
        if self.screenshot_url_prefix == "/":
            # "//name.png" would be read as a protocol-relative URL
            self.screenshot_url_prefix = ""

    def ensure_screenshot_dir(self) -> str:
        os.makedirs(self.screenshot_dir, exist_ok=True)
        return self.screenshot_dir

    def screenshot_path(self, source_slug: str, index: int, timestamp: int) -> Tuple[str, str]:
        """Returns (file path on disk, public path handed to callers)."""
        filename = f"{source_slug}-{index}-{timestamp}.png"
        return (
            os.path.join(self.screenshot_dir, filename),
            f"{self.screenshot_url_prefix}/{filename}",
        )

    def save_json(self, properties: List[Property], filename: str) -> str:
        os.makedirs(self.output_dir, exist_ok=True)
        path = os.path.join(self.output_dir, filename)
        with open(path, "w", encoding="utf-8") as f:
            json.dump([p.to_dict() for p in properties], f, ensure_ascii=False, indent=2)
        return path

    def save_csv(self, properties: List[Property], filename: str) -> str:
        os.makedirs(self.output_dir, exist_ok=True)
        path = os.path.join(self.output_dir, filename)
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_HEADERS)
            writer.writeheader()
            for prop in properties:
                row = prop.to_dict()
                row["images"] = ",".join(row["images"])
                row["features"] = ",".join(row["features"])
                writer.writerow(row)
        return path
