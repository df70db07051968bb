from __future__ import annotations

BLAVATNIK_PROMPT = """Extract the weekly lunch menu from this image. Return ONLY valid JSON with no markdown or code fences:
{
  "Monday": {"meat": "meat or fish option — ~Xkcal", "veg": "vegetarian or vegan option — ~Xkcal", "side": "soup or side — ~Xkcal"},
  "Tuesday": {"meat": "...", "veg": "...", "side": "..."},
  "Wednesday": {"meat": "...", "veg": "...", "side": "..."},
  "Thursday": {"meat": "...", "veg": "...", "side": "..."},
  "Friday": {"meat": "...", "veg": "...", "side": "..."}
}
Use empty string "" for any category not present. Include calorie counts if shown."""

SCHWARZMAN_PROMPT = """Extract the "Build Your Own" lunch menu from this image. Return ONLY valid JSON with no markdown or code fences.

The menu has categories like Base, Sides, Protein, Toppings, Sauces & Pickles, etc. Return a JSON object where keys are the category names exactly as shown and values are arrays of items:
{
  "Base": ["item1", "item2"],
  "Sides": ["item1", "item2", "item3"],
  "Protein": ["item1", "item2"],
  "Toppings": ["item1", "item2"],
  "Sauces & Pickles": ["item1", "item2"]
}

Important:
- Strip any calorie counts and pricing info from items
- Preserve category names exactly as they appear on the board
- Preserve the exact order items appear in each category
- Include ALL categories and ALL items you can read"""
