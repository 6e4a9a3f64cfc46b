"""
Configuration constants for the EXIF table exporter.
"""

# --- File Type Definitions ---
# Matched against Path.suffix as-is (no case folding)
JPEG_EXTS = {'.jpg'}

# --- Metadata Fields ---
# Placeholder written for any value that is missing or unparsable
SENTINEL = "none"

# Tags requested from exiftool, in request order
EXIF_FIELDS = [
    'FileName',
    'Model',
    'ShutterSpeedValue',
    'FNumber',
    'ISO',
    'LensModel',
    'CreateDate',
]

# exiftool tag -> ExifRecord attribute
FIELD_ATTRS = {
    'CreateDate': 'create_date',
    'FileName': 'file_name',
    'Model': 'camera_model',
    'ShutterSpeedValue': 'shutter_speed',
    'FNumber': 'f_number',
    'ISO': 'iso',
    'LensModel': 'lens_model',
}

# Column headers, in output order (matches ExifRecord field order)
COLUMN_LABELS = [
    'Create Date',
    'File Name',
    'Camera Model Name',
    'Shutter Speed Value',
    'F Number',
    'ISO',
    'Lens Model',
]

# --- Output ---
OUTPUT_FORMATS = {
    'csv': ',',
    'tsv': '\t',
}
DEFAULT_FORMAT = 'csv'

# --- Environment ---
DIR_ENV_VAR = 'EXIF_TABLE_DIR'
EXIFTOOL_ENV_VAR = 'EXIFTOOL_PATH'
EXIFTOOL_BIN = 'exiftool'

# --- Performance ---
# Upper bound for --workers; each worker holds one exiftool process
MAX_WORKERS = 8
