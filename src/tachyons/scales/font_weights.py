font_weights = {
    "normal": {"fontWeight": "normal"},
    "b": {"fontWeight": "bold"},
    "fw1": {"fontWeight": "100"},
    "fw2": {"fontWeight": "200"},
    "fw3": {"fontWeight": "300"},
    "fw4": {"fontWeight": "400"},
    "fw5": {"fontWeight": "500"},
    "fw6": {"fontWeight": "600"},
    "fw7": {"fontWeight": "700"},
    "fw8": {"fontWeight": "800"},
    "fw9": {"fontWeight": "900"},
}
