from dataclasses import dataclass, asdict
import json, os


@dataclass
class Config:
    # Files/IO
    index_dir: str = "index/"
    encoding: str = "utf-8"

    # Matrix cell type; counts never go negative
    matrix_dtype: str = "uint32"

    # Also write human-readable dumps next to the binary files
    save_text: bool = True

    # Misc
    log_level: str = "INFO"

    def to_json(self, out_path: str):
        directory = os.path.dirname(out_path) or "."
        os.makedirs(directory, exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def from_json(cls, path: str) -> "Config":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls(**data)
