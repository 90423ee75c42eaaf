"""Canned backend payloads for the simulated services, keyed by user id."""

PROFILES: dict[str, str] = {
    "1": '{"id": "1", "first_name": "Kevin", "last_name": "Flynn"}',
    "2": '{"id": "2", "first_name": "Alan", "last_name": "Bradley"}',
    "3": '{"id": "3", "first_name": "Lora", "last_name": "Baines"}',
}

ACCOUNTS: dict[str, str] = {
    "1": """[
        {"id": "1", "type": "Banking", "name": "Basic Savings", "amount": 929466.23,
         "created_at": "2010-06-21T15:29:32Z"},
        {"id": "2", "type": "Banking", "name": "No-Fee All-In Chequing", "amount": 17562.44,
         "created_at": "2011-06-21T15:29:32Z"},
        {"id": "3", "type": "CreditCard", "name": "Visa Avion Card", "amount": 412.83,
         "created_at": "2012-06-21T15:29:32Z"},
        {"id": "4", "type": "CreditCard", "name": "Student Mastercard", "amount": 50.83,
         "created_at": "2013-06-21T15:29:32Z"},
        {"id": "5", "type": "Investment", "name": "Tax-Free Saver", "amount": 2000.00,
         "created_at": "2014-06-21T15:29:32Z"},
        {"id": "6", "type": "Investment", "name": "Growth Fund", "amount": 15000.00,
         "created_at": "2015-06-21T15:29:32Z"}
    ]""",
    "2": """[
        {"id": "7", "type": "Banking", "name": "Everyday Chequing", "amount": 2048.00,
         "created_at": "2016-02-01T09:00:00Z"},
        {"id": "8", "type": "CreditCard", "name": "Cash Back Visa", "amount": 1233.09,
         "created_at": "2017-03-15T09:00:00Z"}
    ]""",
    "3": """[
        {"id": "9", "type": "Investment", "name": "Retirement Portfolio", "amount": 1250000.75,
         "created_at": "2009-11-30T12:00:00Z"}
    ]""",
}
