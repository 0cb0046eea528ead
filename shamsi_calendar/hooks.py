app_name = "shamsi_calendar"
app_title = "Shamsi Calendar"
app_publisher = "Dastyar Team"
app_description = "Gregorian and Jalali calendar engine with stable Gregorian date keys for date-indexed records."
app_email = "support@example.com"
app_license = "MIT"

# Boot
boot_session = "shamsi_calendar.boot.boot_session"

# Jinja
jinja = {
    "filters": [
        "shamsi_calendar.api.converter.format_jalali",
    ],
}

# Fixtures / Data
fixtures = []
