"""
Fixture catalog and orders served by the mock ERP record source
"""

MOCK_PRODUCTS = [
    {
        "sku": "SKU001",
        "name": "Premium Widget A",
        "retail_price": 29.99,
        "wholesale_price_paypal": 21.99,
        "wholesale_price_bank_wire": 19.99,
        "status": "in_stock",
        "cut_off_date": None,
        "quantity_per_carton": 24,
        "box_size": "30x20x15 cm",
    },
    {
        "sku": "SKU002",
        "name": "Deluxe Gadget B",
        "retail_price": 49.99,
        "wholesale_price_paypal": 37.99,
        "wholesale_price_bank_wire": 34.99,
        "status": "presale",
        "cut_off_date": "2024-02-15",
        "quantity_per_carton": 12,
        "box_size": "40x30x20 cm",
    },
    {
        "sku": "SKU003",
        "name": "Standard Item C",
        "retail_price": 15.99,
        "wholesale_price_paypal": 11.99,
        "wholesale_price_bank_wire": 9.99,
        "status": "in_stock",
        "cut_off_date": None,
        "quantity_per_carton": 48,
        "box_size": "25x15x10 cm",
    },
    {
        "sku": "SKU004",
        "name": "Economy Product D",
        "retail_price": 8.99,
        "wholesale_price_paypal": 6.99,
        "wholesale_price_bank_wire": 5.99,
        "status": "in_stock",
        "cut_off_date": None,
        "quantity_per_carton": 100,
        "box_size": "20x10x10 cm",
    },
    {
        "sku": "SKU005",
        "name": "Luxury Item E",
        "retail_price": 199.99,
        "wholesale_price_paypal": 159.99,
        "wholesale_price_bank_wire": 149.99,
        "status": "presale",
        "cut_off_date": "2024-03-01",
        "quantity_per_carton": 6,
        "box_size": "50x40x30 cm",
    },
]

MOCK_ORDERS = [
    {
        "order_number": "ORD-2024-001",
        "user_email": "user@wholesale.com",
        "status": "shipped",
        "shipment_date": "2024-01-20T10:30:00Z",
        "created_at": "2024-01-15T10:30:00Z",
        "order_lines": [
            {"sku": "SKU001", "quantity": 24, "tracking_number": "TRK123456789", "shipped_at": "2024-01-20T10:30:00Z"},
            {"sku": "SKU003", "quantity": 48, "tracking_number": "TRK123456789", "shipped_at": "2024-01-20T10:30:00Z"},
        ],
    },
    {
        "order_number": "ORD-2024-002",
        "user_email": "user@wholesale.com",
        "status": "partial",
        "shipment_date": "2024-01-22T14:20:00Z",
        "created_at": "2024-01-18T14:20:00Z",
        "order_lines": [
            {"sku": "SKU002", "quantity": 12, "tracking_number": "TRK987654321", "shipped_at": "2024-01-22T14:20:00Z"},
            {"sku": "SKU004", "quantity": 50, "tracking_number": None, "shipped_at": None},  # Not shipped yet
        ],
    },
    {
        "order_number": "ORD-2024-003",
        "user_email": "user@wholesale.com",
        "status": "pending",
        "shipment_date": None,
        "created_at": "2024-01-25T09:15:00Z",
        "order_lines": [
            {"sku": "SKU005", "quantity": 6, "tracking_number": None, "shipped_at": None},
        ],
    },
    {
        "order_number": "ORD-2024-004",
        "user_email": "another@example.com",
        "status": "shipped",
        "shipment_date": "2024-01-21T16:45:00Z",
        "created_at": "2024-01-20T16:45:00Z",
        "order_lines": [
            {"sku": "SKU004", "quantity": 100, "tracking_number": "TRK111222333", "shipped_at": "2024-01-21T16:45:00Z"},
        ],
    },
    {
        "order_number": "ORD-2024-005",
        "user_email": "user@wholesale.com",
        "status": "shipped",
        "shipment_date": "2024-01-28T11:00:00Z",
        "created_at": "2024-01-22T11:00:00Z",
        "order_lines": [
            {"sku": "SKU001", "quantity": 48, "tracking_number": "TRK444555666", "shipped_at": "2024-01-28T11:00:00Z"},
            {"sku": "SKU002", "quantity": 24, "tracking_number": "TRK444555666", "shipped_at": "2024-01-28T11:00:00Z"},
            {"sku": "SKU003", "quantity": 96, "tracking_number": "TRK777888999", "shipped_at": "2024-01-28T11:00:00Z"},
        ],
    },
]
