import json
import logging
import os

from .owner_processor import OwnerProcessor
from .schema import OwnerDataValidationError, validate_property_owners

logger = logging.getLogger(__name__)

OUTPUT_FILENAME = 'owner_data.json'


def print_status(message):
    """Print status message to console"""
    print(f"STATUS: {message}")
    logger.info(f"STATUS: {message}")


def extract_property_id(filepath, data):
    """Use the property_id field, else the input filename without extension"""
    property_id = data.get('property_id') if isinstance(data, dict) else None
    if property_id:
        return str(property_id).strip()
    return os.path.splitext(os.path.basename(filepath))[0]


def load_property_input(filepath):
    """
    Read one property's extracted owner text.

    Expected layout:
        {"property_id": "...",
         "sales": [{"date": "2019-05-01", "grantee": "SMITH JOHN & MARY"}],
         "current_owners": ["SMITH JOHN", "SMITH MARY"]}

    Returns (property_id, sales pairs, current owner lines).
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict) or not isinstance(data.get('sales'), list):
        raise ValueError(f"{filepath}: expected an object with a 'sales' list")

    sales = []
    for sale in data['sales']:
        if not isinstance(sale, dict):
            continue
        grantee = sale.get('grantee')
        if grantee and str(grantee).strip():
            sale_date = sale.get('date')
            sales.append((None if sale_date is None else str(sale_date), str(grantee)))

    lines = data.get('current_owners') or []
    if isinstance(lines, str):
        lines = [lines]
    if not isinstance(lines, list):
        raise ValueError(f"{filepath}: 'current_owners' must be a list of strings")
    current_owners = [str(line) for line in lines if line and str(line).strip()]
    return extract_property_id(filepath, data), sales, current_owners


def process_property_file(filepath, processor):
    """Return (output key, owner data dict) for one input file"""
    property_id, sales, current_owners = load_property_input(filepath)
    history = processor.build_owners_by_date(sales, current_owners)
    key = f'property_{property_id}'
    data = history.to_dict()
    validate_property_owners(key, data)
    return key, data


def run(input_dir, output_dir, vocabulary=None):
    """
    Process every *.json file in input_dir and write owner_data.json.

    Returns the number of properties that failed.
    """
    processor = OwnerProcessor(vocabulary=vocabulary) if vocabulary else OwnerProcessor()

    if not os.path.isdir(input_dir):
        logger.error(f"Input directory {input_dir} does not exist")
        print(f"Input directory {input_dir} does not exist!")
        return 1

    input_files = sorted(f for f in os.listdir(input_dir) if f.endswith('.json'))
    if not input_files:
        print_status(f"No JSON files found in {input_dir}")
        return 0

    print_status(f"Found {len(input_files)} property files to process")

    result = {}
    failed = 0
    for filename in input_files:
        filepath = os.path.join(input_dir, filename)
        try:
            key, data = process_property_file(filepath, processor)
        except (OSError, json.JSONDecodeError, ValueError) as e:
            logger.error(f"Error reading {filepath}: {e}")
            failed += 1
            continue
        except OwnerDataValidationError as e:
            logger.error(f"Schema validation failed for {e}")
            failed += 1
            continue

        result[key] = data
        owners = data['owners_by_date']
        logger.info(
            f"{key}: {len(owners) - 1} dated entries, {len(owners['current'])} current owner(s), "
            f"{len(data['invalid_owners'])} invalid"
        )

    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, OUTPUT_FILENAME)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(result, f, indent=2, ensure_ascii=False)

    print_status(f"Processed {len(result)} properties ({failed} failed), results saved to {output_path}")
    return failed
