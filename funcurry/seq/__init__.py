"""Iterator helpers: generation, zipping, taking, filtering, mapping and channels."""