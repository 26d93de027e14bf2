"""dotlink - symlink a dotfiles repository into a home directory."""
