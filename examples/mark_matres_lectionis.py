"""
Run with:
    wget https://huggingface.co/thewh1teagle/phonikud-onnx/resolve/main/phonikud-1.0.int8.onnx -O phonikud.onnx
    wget https://huggingface.co/dicta-il/dictabert-large-char-menaked/raw/main/tokenizer.json -O tokenizer.json
    python examples/mark_matres_lectionis.py
"""

from phonikud_onnx import MATRES_LECTIONIS_MARK, Phonikud

model = Phonikud('phonikud.onnx', 'tokenizer.json')

text = "הדייג נצמד לדופן הסירה בזמן הסערה."

# Alef, vav and yod that act as vowels get U+05AF
nikud_text = model.add_diacritics(text, mark_matres_lectionis=MATRES_LECTIONIS_MARK)

print(f"Input:  {text}")
print(f"Output: {nikud_text}")
