"""
Default text for generated documents.

Shared by the HTML preview and the print layout, so both show the same headings
and the same placeholders for empty optional fields.
"""

NOT_SPECIFIED = "Not specified"

CV_TEXT = {
    "title": "RESUME",
    "contact_header": "CONTACT INFORMATION",
    "skills_header": "SKILLS",
    "phone": "Phone",
    "email": "Email",
    "city": "City",
    "birth_date": "Date of birth",
    "created": "Created",
}

# Main-column sections in display order: (field name, header)
CV_SECTIONS = (
    ("objective", "PROFESSIONAL OBJECTIVE"),
    ("experience", "WORK EXPERIENCE"),
    ("education", "EDUCATION"),
    ("languages", "LANGUAGES"),
    ("additional", "ADDITIONAL INFORMATION"),
)

LETTER_TEXT = {
    "subject": "Subject:",
    "attachments": "Attachments:",
    "stamp": "Place for stamp",
    "number_prefix": "No.",
}

# Placeholders for empty letter fields
LETTER_PLACEHOLDERS = {
    "organizationName": "ORGANIZATION NAME",
    "organizationAddress": "Organization address",
    "organizationPhone": "+1 (___) ___-____",
    "organizationEmail": "email@organization.com",
    "outgoingNumber": "___",
    "recipientPosition": "Position",
    "recipientOrganization": "Organization name",
    "recipientAddress": "Recipient address",
    "greeting": "Dear",
    "closing": "Sincerely,",
    "senderPosition": "Sender position",
}

PROTOCOL_TEXT = {
    "title": "PROTOCOL",
    "number": "Protocol No.:",
    "date": "Meeting date:",
    "time": "Meeting time:",
    "location": "Location:",
    "chairman": "Chairman:",
    "secretary": "Secretary:",
    "participants": "PRESENT:",
    "agenda": "AGENDA:",
    "discussion": "DISCUSSION:",
    "decisions": "RESOLVED:",
}
