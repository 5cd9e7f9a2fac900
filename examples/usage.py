"""
Run with:
    wget https://huggingface.co/thewh1teagle/phonikud-onnx/resolve/main/phonikud-1.0.int8.onnx -O phonikud.onnx
    wget https://huggingface.co/dicta-il/dictabert-large-char-menaked/raw/main/tokenizer.json -O tokenizer.json
    python examples/usage.py
"""

from phonikud_onnx import Phonikud

# Load the model
model = Phonikud('phonikud.onnx', 'tokenizer.json')

# Plain Hebrew text
text = "הכוח לשנות מתחיל ברגע שבו אתה מאמין שזה אפשרי!"

# Add nikud (diacritical marks)
nikud_text = model.add_diacritics(text)

print(f"Input:  {text}")
print(f"Output: {nikud_text}")
