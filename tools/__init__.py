# tools package marker
