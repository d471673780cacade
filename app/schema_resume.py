# canonical final record (empty lists – no placeholders)
PROFILE_SCHEMA = {
    "name": "",
    "email": "",
    "phone": "",
    "location": "",
    "summary": "",
    "social": [],
}

RECORD_SCHEMA = {
    "profile": PROFILE_SCHEMA,
    "education": [],
    "positions": [],
    "publications": [],
    "projects": [],
    "skills": {},
    "awards": [],
}

REQUIRED_KEYS = tuple(RECORD_SCHEMA)

# expected container type of every top-level value
RECORD_TYPES = {key: type(value) for key, value in RECORD_SCHEMA.items()}
