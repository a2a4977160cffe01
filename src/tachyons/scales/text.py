text = {
    "tl": {"textAlign": "left"},
    "tc": {"textAlign": "center"},
    "tr": {"textAlign": "right"},
    "tj": {"textAlign": "justify"},
    "i": {"fontStyle": "italic"},
    "fs-normal": {"fontStyle": "normal"},
    "ttc": {"textTransform": "capitalize"},
    "ttl": {"textTransform": "lowercase"},
    "ttu": {"textTransform": "uppercase"},
    "ttn": {"textTransform": "none"},
    "underline": {"textDecorationLine": "underline"},
    "strike": {"textDecorationLine": "line-through"},
    "no-underline": {"textDecorationLine": "none"},
}
