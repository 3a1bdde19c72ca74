"""Terminal image backends for the Kitty, iTerm and Sixel protocols."""