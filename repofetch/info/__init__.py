"""Info fields of a repository summary, each with a title and a value."""