"""Import pipeline steps: slugs, thread index, comment mapping, storage, includes."""
