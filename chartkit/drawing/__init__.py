"""Colors, styles, transforms, paths, curve flattening, dashing, stroking and a stack graphic context."""