"""Blog API: auth, users, posts and comments."""
