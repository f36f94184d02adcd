from .json_schema_to_go import json_schema_to_go

if __name__ == "__main__":
    json_schema_to_go()
