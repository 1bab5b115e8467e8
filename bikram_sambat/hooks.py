app_name = "bikram_sambat"
app_title = "Bikram Sambat Calendar"
app_publisher = "Bikram Sambat Calendar Contributors"
app_description = "Bikram Sambat (Nepali) calendar conversion and month grids for Frappe, with server-side utilities."
app_email = "support@example.com"
app_license = "MIT"

# Assets
app_include_js = [
    "assets/bikram_sambat/js/bikram_sambat.bundle.js",
]

# Boot
boot_session = "bikram_sambat.boot.boot_session"

# Fixtures / Data
fixtures = []

# CLI entry points are defined in setup.py
