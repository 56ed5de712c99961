import os
from decimal import Decimal

DATA_DIR = os.environ.get("ROOM_RENTAL_DATA_DIR", "customer_data")
INVOICE_DIR = os.environ.get("ROOM_RENTAL_INVOICE_DIR", "Invoice")
TAX_RATE = Decimal(os.environ.get("ROOM_RENTAL_TAX_RATE", "0.18"))
MAX_RATE = Decimal("10000000")

CUSTOMERS_FILE = "customers.json"
ID_PHOTOS_DIR = "id_photos"
ALLOWED_PHOTO_EXTENSIONS = (".png", ".jpg", ".jpeg")

BUSINESS_NAME = "Trinity Stays"
BUSINESS_ADDRESS = "123, Main Street, Chennai - 600001"
BUSINESS_PHONE = "+91 98765 43210"
GSTIN = "33AALCT2345K1ZB"
CURRENCY = "Rs."

DISPLAY_DATE_FORMAT = "%d-%m-%Y"
PERIOD_DATE_FORMAT = "%d/%m/%y"

TERMS_AND_CONDITIONS = (
    "1. Check-in time is 12:00 PM and check-out time is 11:00 AM",
    "2. Payment to be made in advance",
    "3. No refunds for early check-out",
    "4. ID proof is mandatory for all guests",
    "5. Outside food is not allowed",
    "6. Pets are not allowed",
    "7. The management is not responsible for any valuables",
    "8. Any damage to hotel property will be charged",
)
